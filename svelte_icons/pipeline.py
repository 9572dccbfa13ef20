from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import GeneratorConfig
from .generator import ComponentGenerator
from .log import log
from .manifest import ManifestBuilder
from .naming import check_identifiers
from .source import IconSource


@dataclass(frozen=True)
class GenerationResult:
    identifiers: list[str]
    component_dir: Path
    manifest_path: Path

    @property
    def count(self) -> int:
        return len(self.identifiers)


def run_generation(config: GeneratorConfig) -> GenerationResult:
    """One full, synchronous generation step. Any IconGenerationError aborts the run."""
    records = IconSource(config).load()
    check_identifiers(records, prefix=config.prefix)

    generator = ComponentGenerator(config, records)
    generator.prepare()
    identifiers = [generator.generate(slug) for slug in records]

    manifest_path = ManifestBuilder(config).build(identifiers)
    log.info("Successfully generated %d icon components!", len(identifiers))
    return GenerationResult(
        identifiers=identifiers,
        component_dir=config.output_dir,
        manifest_path=manifest_path,
    )
