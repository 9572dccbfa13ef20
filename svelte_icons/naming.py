from __future__ import annotations

import re
from typing import Iterable

from .errors import IdentifierCollisionError, IdentifierError

_WORD_START = re.compile(r"(?:^\w|[A-Z]|\b\w|\s+)", re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def upper_camel_case(text: str) -> str:
    capitalized = _WORD_START.sub(lambda m: m.group(0).upper(), text)
    return _WHITESPACE.sub("", capitalized)


def component_identifier(slug: str, prefix: str = "Si") -> str:
    return f"{prefix}{upper_camel_case(slug)}"


def is_valid_identifier(name: str) -> bool:
    return bool(_JS_IDENTIFIER.match(name))


def check_identifiers(slugs: Iterable[str], *, prefix: str = "Si") -> dict[str, str]:
    """Derive every identifier up front; reject invalid names and collisions before any write."""
    by_slug: dict[str, str] = {}
    owners: dict[str, list[str]] = {}
    for slug in slugs:
        identifier = component_identifier(slug, prefix)
        if not is_valid_identifier(identifier):
            raise IdentifierError(f"Slug {slug!r} derives invalid identifier {identifier!r}")
        by_slug[slug] = identifier
        owners.setdefault(identifier, []).append(slug)

    for identifier, owned in owners.items():
        if len(owned) > 1:
            raise IdentifierCollisionError(identifier, owned)
    return by_slug
