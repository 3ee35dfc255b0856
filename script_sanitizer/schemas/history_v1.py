"""History schema v1.0.0: load, dump, validate.

A history file is a JSON array of HistoryItem, newest first.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from script_sanitizer.generation.models import HistoryItem

SCHEMA_VERSION = "1.0.0"

_HISTORY = TypeAdapter(List[HistoryItem])


def load_history(source: Union[str, bytes, list, Path]) -> List[HistoryItem]:
    """Parse history entries from JSON string, bytes, list, or file Path.

    Raises:
        ValidationError: data does not conform to the HistoryItem schema.
        FileNotFoundError: Path does not exist.
    """
    if isinstance(source, Path):
        data = json.loads(source.read_text(encoding="utf-8"))
    elif isinstance(source, (str, bytes)):
        data = json.loads(source)
    else:
        data = source
    return _HISTORY.validate_python(data)


def dump_history(items: Sequence[HistoryItem], *, indent: int = 2) -> str:
    """Serialize history entries to canonical JSON (sort_keys=True, indent=2)."""
    raw = [item.model_dump(mode="json", by_alias=True, exclude_none=True) for item in items]
    return json.dumps(raw, sort_keys=True, indent=indent, ensure_ascii=False)


def validate_history(data: list) -> List[str]:
    """Validate raw history data.  Returns error strings; does not raise."""
    try:
        _HISTORY.validate_python(data)
        return []
    except ValidationError as exc:
        return [f"{e['loc']}: {e['msg']}" for e in exc.errors()]


def find_history_item(items: Sequence[HistoryItem], history_id: str) -> HistoryItem:
    """Return the entry with *history_id*.

    Raises:
        ValueError: no entry has that id.
    """
    for item in items:
        if item.id == history_id:
            return item
    raise ValueError(f"ERROR: history item not found: {history_id!r}")


def add_history_item(items: Sequence[HistoryItem], item: HistoryItem) -> List[HistoryItem]:
    """New history list with *item* first, followed by *items* in order."""
    return [item, *items]


def delete_history_item(items: Sequence[HistoryItem], history_id: str) -> List[HistoryItem]:
    """New history list without the entry *history_id*.  A missing id is a no-op."""
    return [item for item in items if item.id != history_id]
