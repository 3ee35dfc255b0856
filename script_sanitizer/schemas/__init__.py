"""Versioned schema loaders and validators."""

from script_sanitizer.schemas.history_v1 import (
    add_history_item,
    delete_history_item,
    dump_history,
    find_history_item,
    load_history,
    validate_history,
)
from script_sanitizer.schemas.script_v1 import dump_scripts, load_scripts, validate_scripts
from script_sanitizer.schemas.term_map_v1 import dump_term_map, load_term_map

__all__ = [
    "load_scripts",
    "dump_scripts",
    "validate_scripts",
    "load_history",
    "dump_history",
    "validate_history",
    "find_history_item",
    "add_history_item",
    "delete_history_item",
    "load_term_map",
    "dump_term_map",
]
