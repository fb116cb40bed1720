from __future__ import annotations
import json
import logging
import os
import shlex
from typing import Iterable, Iterator, List, Optional

from .config import Config, Field
from .models import AppRecord, Candidate

log = logging.getLogger(__name__)

# Progress logging (set LAUNCHER_VERBOSE=1 to enable)
VERBOSE = os.environ.get("LAUNCHER_VERBOSE") == "1"
PROGRESS_EVERY_RECORDS = 500

_RECORD_KEYS = ("app_id", "name", "description", "executable", "commandline", "last_used", "hidden")


def get_field(record: AppRecord, field: Field) -> Optional[str]:
    """Derive one field's text from a record, or None if the record lacks it."""
    if field == Field.COMMENT:
        return record.description or None
    if field == Field.ID:
        if not record.app_id.endswith(".desktop"):
            return None
        return record.app_id.removesuffix(".desktop") or None
    if field == Field.ID_SUFFIX:
        # org.gnome.Nautilus.desktop -> Nautilus
        parts = record.app_id.rsplit(".")
        return parts[-2] if len(parts) >= 2 and parts[-2] else None
    if field == Field.EXECUTABLE:
        if not record.executable:
            return None
        try:
            words = shlex.split(os.path.basename(record.executable))
        except ValueError:
            return None
        return " ".join(words) or None
    if field == Field.COMMANDLINE:
        return record.commandline or None
    raise ValueError(f"Unknown field: {field!r}")

def _display_with_extra(record: AppRecord, config: Config) -> tuple[str, Optional[tuple[int, int]]]:
    override = None
    app_key = get_field(record, Field.ID)
    if app_key is not None:
        override = config.name_overrides.get(app_key)

    if override is not None:
        # "\r" separates the name from its extra annotation
        i = override.find("\r")
        if i == -1:
            return override, None
        return override.replace("\r", " "), (i + 1, len(override))

    name = record.name
    extra = get_field(record, config.extra_field[0]) if config.extra_field else None
    if extra and not (config.hide_extra_if_contained and extra.lower() in name.lower()):
        start = len(name) + 1
        return f"{name} {extra}", (start, start + len(extra))
    return name, None

def make_candidate(record: AppRecord, config: Config) -> Candidate:
    """Compose display text, extra range and search text for one record."""
    display, extra_range = _display_with_extra(record, config)

    hidden = " ".join(
        v for v in (get_field(record, f) for f in config.hidden_fields) if v
    )
    search = f"{display} {hidden}" if hidden else display

    return Candidate(
        display_text=display,
        search_text=search,
        highlight_range=extra_range,
        score=config.full_match_score,
        last_used=int(record.last_used) if config.recent_first else 0,
        app_id=record.app_id,
    )

def make_candidates(records: Iterable[AppRecord], config: Config) -> Iterator[Candidate]:
    """Lazily yield candidates for visible, non-excluded records."""
    excluded = set(config.exclude)
    for rec in records:
        if rec.hidden:
            continue
        if get_field(rec, Field.ID) in excluded or rec.app_id in excluded:
            continue
        yield make_candidate(rec, config)

def record_from_mapping(data: dict) -> AppRecord:
    if not isinstance(data, dict):
        raise ValueError(f"record must be an object, got {type(data).__name__}")
    unknown = set(data) - set(_RECORD_KEYS)
    if unknown:
        raise ValueError(f"unknown record keys: {sorted(unknown)}")
    if not data.get("app_id") or not isinstance(data.get("name"), str):
        raise ValueError("record requires 'app_id' and 'name'")
    return AppRecord(
        app_id=str(data["app_id"]),
        name=data["name"],
        description=str(data.get("description") or ""),
        executable=str(data.get("executable") or ""),
        commandline=str(data.get("commandline") or ""),
        last_used=int(data.get("last_used") or 0),
        hidden=bool(data.get("hidden", False)),
    )

def read_records(path: str) -> List[AppRecord]:
    """
    Read app records from a JSON-lines file (one object per line).
    Blank lines are ignored; malformed lines are logged and skipped.
    """
    records: List[AppRecord] = []
    with open(path, "r", encoding="utf-8") as f:
        for line_no, raw in enumerate(f, start=1):
            raw = raw.strip()
            if not raw:
                continue
            try:
                records.append(record_from_mapping(json.loads(raw)))
            except (ValueError, TypeError) as e:
                log.warning("%s:%d: skipping record: %s", path, line_no, e)
                continue
            if VERBOSE and len(records) % PROGRESS_EVERY_RECORDS == 0:
                log.info("[loaded] records=%d", len(records))
    log.info("Read %d records from %s", len(records), path)
    return records
