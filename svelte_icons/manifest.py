from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from .config import GeneratorConfig
from .errors import ManifestWriteError
from .log import log
from .template import render_export, render_props_type

FILE_ENCODING = "utf-8"


def relative_module_path(config: GeneratorConfig, identifier: str) -> str:
    rel = Path(os.path.relpath(config.output_dir, config.lib_dir)).as_posix()
    filename = f"{identifier}.{config.extension}"
    if rel == ".":
        return f"./{filename}"
    if not rel.startswith("../"):
        rel = f"./{rel}"
    return f"{rel}/{filename}"


class ManifestBuilder:
    """Barrel file: shared props type, then one re-export per identifier in the given order."""

    def __init__(self, config: GeneratorConfig):
        self.config = config

    @property
    def path(self) -> Path:
        return self.config.manifest_path

    def build(self, identifiers: Iterable[str]) -> Path:
        path = self.path
        count = 0
        try:
            path.write_text("", encoding=FILE_ENCODING)
            with path.open("a", encoding=FILE_ENCODING) as f:
                f.write(render_props_type(self.config.prefix))
                for identifier in identifiers:
                    f.write(render_export(identifier, relative_module_path(self.config, identifier)))
                    count += 1
        except OSError as e:
            raise ManifestWriteError(f"Could not write manifest {path}: {e}") from e
        log.info("Wrote %s with %d exports", path, count)
        return path
