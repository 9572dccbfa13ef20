"""Exception hierarchy for the icon component generator."""

from __future__ import annotations


class IconGenerationError(Exception):
    """Base exception for all generation failures."""


class IconSourceError(IconGenerationError):
    """The raw icon dataset could not be read (strict mode only)."""


class MissingIconError(IconGenerationError):
    """A slug was requested that is not in the normalized icon mapping."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Icon data for {slug} not found in the icon source")


class IdentifierError(IconGenerationError):
    """A derived component identifier is not a valid JS identifier."""


class IdentifierCollisionError(IdentifierError):
    """Two slugs derive the same component identifier."""

    def __init__(self, identifier: str, slugs: list[str]):
        self.identifier = identifier
        self.slugs = slugs
        super().__init__(f"Identifier {identifier} derived from multiple slugs: {', '.join(slugs)}")


class ComponentWriteError(IconGenerationError):
    """A component file could not be written."""


class ManifestWriteError(IconGenerationError):
    """The manifest file could not be written."""
