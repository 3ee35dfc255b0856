"""Generator output: script models, response ingestion and history entries."""

from script_sanitizer.generation.ingest import (
    ingest_generator_response,
    make_history_item,
    parse_generator_reply,
    validate_generator_response,
)
from script_sanitizer.generation.models import (
    GeneratedScript,
    GeneratorResponse,
    HistoryItem,
    Script,
    ScriptScene,
)

__all__ = [
    "ingest_generator_response",
    "make_history_item",
    "parse_generator_reply",
    "validate_generator_response",
    "GeneratedScript",
    "GeneratorResponse",
    "HistoryItem",
    "Script",
    "ScriptScene",
]
