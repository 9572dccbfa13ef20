from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SOURCE = "simple-icons.json"
DEFAULT_LIB_DIR = "src/lib"
DEFAULT_MANIFEST = "index.ts"
DEFAULT_PREFIX = "Si"
DEFAULT_EXTENSION = "svelte"
DEFAULT_KEY_PREFIX = "si"
DEFAULT_RESERVED_KEY = "siPrefix"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class GeneratorConfig:
    source_path: Path
    lib_dir: Path
    output_dir: Path
    manifest_name: str = DEFAULT_MANIFEST
    prefix: str = DEFAULT_PREFIX
    extension: str = DEFAULT_EXTENSION
    key_prefix: str = DEFAULT_KEY_PREFIX
    reserved_key: str = DEFAULT_RESERVED_KEY
    strict_source: bool = False

    @property
    def manifest_path(self) -> Path:
        return self.lib_dir / self.manifest_name


def _env(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def get_generator_config(
    *,
    source_path: str | Path | None = None,
    lib_dir: str | Path | None = None,
    output_dir: str | Path | None = None,
    manifest_name: str | None = None,
    prefix: str | None = None,
    extension: str | None = None,
    strict_source: bool | None = None,
) -> GeneratorConfig:
    """Build the run configuration; explicit arguments win over ICONS_* env vars."""
    lib = Path(lib_dir) if lib_dir is not None else Path(_env("ICONS_LIB_DIR", DEFAULT_LIB_DIR))

    if output_dir is not None:
        out = Path(output_dir)
    else:
        env_out = os.environ.get("ICONS_OUTPUT_DIR", "").strip()
        out = Path(env_out) if env_out else lib / "icons"

    if strict_source is None:
        strict_source = os.environ.get("ICONS_STRICT_SOURCE", "").strip().lower() in _TRUTHY

    ext = (extension if extension is not None else _env("ICONS_EXTENSION", DEFAULT_EXTENSION)).lstrip(".")
    if not ext:
        raise RuntimeError("Component file extension must not be empty")

    return GeneratorConfig(
        source_path=Path(source_path) if source_path is not None else Path(_env("ICONS_SOURCE", DEFAULT_SOURCE)),
        lib_dir=lib,
        output_dir=out,
        manifest_name=manifest_name or _env("ICONS_MANIFEST", DEFAULT_MANIFEST),
        prefix=prefix if prefix is not None else _env("ICONS_PREFIX", DEFAULT_PREFIX),
        extension=ext,
        strict_source=strict_source,
    )
