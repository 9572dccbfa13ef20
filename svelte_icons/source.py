"""Icon source adapter: raw dataset JSON -> validated ``IconRecord`` mapping."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config import DEFAULT_KEY_PREFIX, DEFAULT_RESERVED_KEY, GeneratorConfig
from .errors import IconSourceError
from .log import log
from .models import IconRecord, RawIconEntry


def _unreadable(message: str, *, strict: bool, cause: Exception | None = None) -> dict[str, Any]:
    if strict:
        raise IconSourceError(message) from cause
    log.warning("%s; continuing with no icons", message)
    return {}


def load_raw_icons(path: str | Path, *, strict: bool = False) -> dict[str, Any]:
    source = Path(path)
    if not source.exists():
        return _unreadable(f"Icon source not found: {source}", strict=strict)

    try:
        text = source.read_text(encoding="utf-8")
    except OSError as e:
        return _unreadable(f"Icon source could not be read: {source}: {e}", strict=strict, cause=e)

    if not text.strip():
        return _unreadable(f"Icon source is empty: {source}", strict=strict)

    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        return _unreadable(f"Icon source is not valid JSON: {source}: {e}", strict=strict, cause=e)

    if not isinstance(obj, dict):
        return _unreadable(f"Icon source is not a JSON object: {source}", strict=strict)
    return obj


def select_entries(raw: dict[str, Any]) -> dict[str, Any]:
    """Prefer a ``default`` export when the dataset was dumped from a module namespace."""
    log.debug("Available keys in icon source: %s ...", list(raw)[:5])
    default = raw.get("default")
    if isinstance(default, dict):
        log.debug("Using default export from icon source")
        return default
    log.debug("Using top-level entries from icon source")
    return raw


def normalize_icons(
    entries: dict[str, Any],
    *,
    key_prefix: str = DEFAULT_KEY_PREFIX,
    reserved_key: str = DEFAULT_RESERVED_KEY,
) -> dict[str, IconRecord]:
    records: dict[str, IconRecord] = {}
    for key, entry in entries.items():
        if not key.startswith(key_prefix) or key == reserved_key:
            continue
        slug = key[len(key_prefix) :].lower()
        if not slug or not isinstance(entry, dict):
            continue

        try:
            raw = RawIconEntry.model_validate(entry)
            if not raw.is_complete():
                log.debug("Skipping %s: missing title or path", key)
                continue
            record = IconRecord(slug=slug, title=raw.title, path_data=raw.path)
        except ValidationError as e:
            log.debug("Skipping %s: %s", key, e.errors()[0].get("msg", "invalid entry"))
            continue

        if slug in records:
            log.warning("Duplicate slug %s (from %s); keeping the later entry", slug, key)
        records[slug] = record
    return records


class IconSource:
    def __init__(self, config: GeneratorConfig):
        self.config = config

    def load(self) -> dict[str, IconRecord]:
        raw = load_raw_icons(self.config.source_path, strict=self.config.strict_source)
        records = normalize_icons(
            select_entries(raw) if raw else {},
            key_prefix=self.config.key_prefix,
            reserved_key=self.config.reserved_key,
        )
        log.info("Found %d icons", len(records))
        return records
