"""Svelte component generator for Simple Icons style datasets."""

from .config import GeneratorConfig, get_generator_config
from .errors import (
    ComponentWriteError,
    IconGenerationError,
    IconSourceError,
    IdentifierCollisionError,
    IdentifierError,
    ManifestWriteError,
    MissingIconError,
)
from .generator import ComponentGenerator
from .manifest import ManifestBuilder
from .models import IconRecord, RawIconEntry
from .naming import check_identifiers, component_identifier, upper_camel_case
from .pipeline import GenerationResult, run_generation
from .source import IconSource, load_raw_icons, normalize_icons

__all__ = [
    "GeneratorConfig",
    "get_generator_config",
    "IconGenerationError",
    "IconSourceError",
    "MissingIconError",
    "IdentifierError",
    "IdentifierCollisionError",
    "ComponentWriteError",
    "ManifestWriteError",
    "ComponentGenerator",
    "ManifestBuilder",
    "IconRecord",
    "RawIconEntry",
    "check_identifiers",
    "component_identifier",
    "upper_camel_case",
    "GenerationResult",
    "run_generation",
    "IconSource",
    "load_raw_icons",
    "normalize_icons",
]
