#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import Sequence

from .config import get_generator_config
from .errors import IconGenerationError
from .log import configure_logging, log
from .pipeline import run_generation


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Generate Svelte icon components and an index.ts barrel from an icon dataset")
    ap.add_argument("--source", default=None, help="Icon dataset JSON (default: $ICONS_SOURCE or simple-icons.json)")
    ap.add_argument("--lib-dir", default=None, help="Library directory holding the manifest (default: src/lib)")
    ap.add_argument("--output-dir", default=None, help="Component output directory (default: <lib-dir>/icons)")
    ap.add_argument("--manifest-name", default=None, help="Manifest filename inside lib-dir (default: index.ts)")
    ap.add_argument("--prefix", default=None, help="Component identifier prefix (default: Si)")
    ap.add_argument("--extension", default=None, help="Component file extension (default: svelte)")
    ap.add_argument(
        "--strict-source",
        action="store_true",
        default=None,
        help="Fail when the icon source is missing or unreadable instead of generating nothing",
    )
    ap.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ... (default: $SVELTE_ICONS_LOG or INFO)")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = get_generator_config(
            source_path=args.source,
            lib_dir=args.lib_dir,
            output_dir=args.output_dir,
            manifest_name=args.manifest_name,
            prefix=args.prefix,
            extension=args.extension,
            strict_source=args.strict_source,
        )
        run_generation(config)
    except (IconGenerationError, OSError, RuntimeError) as e:
        log.error("Error generating icon components: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
