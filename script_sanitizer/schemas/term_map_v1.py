"""TermMap file schema v1.0.0: load and dump.

Accepted on disk: {"terms": {term: replacement}} or a bare
{term: replacement} object.  Dumps always use the wrapped form.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from script_sanitizer.contract_validate import validate_term_map
from script_sanitizer.rewriting.term_map import TermMap

SCHEMA_VERSION = "1.0.0"


def load_term_map(source: Union[str, bytes, dict, Path]) -> TermMap:
    """Build a TermMap from JSON string, bytes, dict, or file Path.

    Raises:
        jsonschema.ValidationError: data violates TermMap.v1.json.
        ValueError: a term is not a valid TermMap key (see TermMap).
        FileNotFoundError: Path does not exist.
    """
    if isinstance(source, Path):
        data = json.loads(source.read_text(encoding="utf-8"))
    elif isinstance(source, (str, bytes)):
        data = json.loads(source)
    else:
        data = source
    validate_term_map(data)
    if isinstance(data.get("terms"), dict):
        data = data["terms"]
    return TermMap(data)


def dump_term_map(term_map: TermMap, *, indent: int = 2) -> str:
    """Serialize a TermMap to canonical JSON (sort_keys=True, indent=2)."""
    return json.dumps({"terms": dict(term_map)}, sort_keys=True, indent=indent, ensure_ascii=False)
