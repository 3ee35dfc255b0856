"""Script batch schema v1.0.0: load, dump, validate.

On disk a batch is {"scripts": [...]} with camelCase keys.  Canonical JSON
(sort_keys=True) keeps serialization byte-identical for identical batches.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from script_sanitizer.generation.models import Script

SCHEMA_VERSION = "1.0.0"

_SCRIPT_LIST = TypeAdapter(List[Script])


def load_scripts(source: Union[str, bytes, dict, list, Path]) -> List[Script]:
    """Parse a Script batch from JSON string, bytes, dict, list, or file Path.

    A dict must carry the batch under "scripts"; a list is taken as the batch
    itself.

    Raises:
        ValidationError: data does not conform to the Script schema.
        FileNotFoundError: Path does not exist.
    """
    if isinstance(source, Path):
        data = json.loads(source.read_text(encoding="utf-8"))
    elif isinstance(source, (str, bytes)):
        data = json.loads(source)
    else:
        data = source
    if isinstance(data, dict):
        data = data.get("scripts")
    return _SCRIPT_LIST.validate_python(data)


def scripts_to_data(scripts: Sequence[Script]) -> dict:
    """Plain {"scripts": [...]} dict, camelCase keys, unset optionals omitted."""
    return {
        "scripts": [
            script.model_dump(mode="json", by_alias=True, exclude_none=True)
            for script in scripts
        ]
    }


def dump_scripts(scripts: Sequence[Script], *, indent: int = 2) -> str:
    """Serialize a Script batch to canonical JSON (sort_keys=True, indent=2)."""
    return json.dumps(scripts_to_data(scripts), sort_keys=True, indent=indent, ensure_ascii=False)


def validate_scripts(data: Union[dict, list]) -> List[str]:
    """Validate a raw batch against the Script schema.

    Returns a list of human-readable error strings (empty list = valid).
    Does not raise.
    """
    try:
        load_scripts(data)
        return []
    except ValidationError as exc:
        return [f"{e['loc']}: {e['msg']}" for e in exc.errors()]
