from __future__ import annotations

from pathlib import Path

from .config import GeneratorConfig
from .errors import ComponentWriteError, MissingIconError
from .log import log
from .models import IconRecord
from .naming import component_identifier
from .template import render_component

FILE_ENCODING = "utf-8"


class ComponentGenerator:
    """Writes one Svelte component per icon record; files are always fully rewritten."""

    def __init__(self, config: GeneratorConfig, records: dict[str, IconRecord]):
        self.config = config
        self.records = records

    def prepare(self) -> None:
        for directory in (self.config.lib_dir, self.config.output_dir):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ComponentWriteError(f"Could not create directory {directory}: {e}") from e

    def identifier_for(self, slug: str) -> str:
        return component_identifier(slug, self.config.prefix)

    def component_path(self, identifier: str) -> Path:
        return self.config.output_dir / f"{identifier}.{self.config.extension}"

    def render(self, identifier: str, record: IconRecord) -> str:
        return render_component(identifier, record)

    def generate(self, slug: str) -> str:
        record = self.records.get(slug)
        if record is None:
            raise MissingIconError(slug)

        identifier = self.identifier_for(slug)
        path = self.component_path(identifier)
        try:
            path.write_text(self.render(identifier, record), encoding=FILE_ENCODING)
        except OSError as e:
            raise ComponentWriteError(f"Could not write component {path}: {e}") from e
        log.debug("Wrote %s", path)
        return identifier
