"""Generator reply -> Script batch.

The generator returns {"scripts": [...]} without ids.  Ingestion checks the
reply against the GeneratorResponse contract, parses it, and stamps ids.

Determinism guarantees
----------------------
- script id:  "scr_" + SHA-256(f"{batch_id}:{index}")[:16]
- history id: f"gen-{timestamp_ms}", timestamp always caller-supplied;
              this module NEVER reads the system clock
"""
from __future__ import annotations

import hashlib
import json
from typing import List, Sequence, Union

from script_sanitizer.contract_validate import validate_generator_response
from script_sanitizer.generation.models import GeneratorResponse, HistoryItem, Script


def parse_generator_reply(reply: Union[str, bytes]) -> dict:
    """Decode the generator's raw JSON text.

    Raises:
        ValueError: the reply is not valid JSON or not a JSON object.
    """
    try:
        data = json.loads(reply)
    except json.JSONDecodeError as exc:
        raise ValueError("ERROR: generator returned invalid JSON") from exc
    if not isinstance(data, dict):
        raise ValueError("ERROR: generator reply must be a JSON object")
    return data


def ingest_generator_response(data: dict, batch_id: str) -> List[Script]:
    """Validate a generator reply and turn it into Scripts with stable ids.

    Raises:
        jsonschema.ValidationError: *data* violates GeneratorResponse.v1.json.
    """
    validate_generator_response(data)
    response = GeneratorResponse.model_validate(data)
    return [
        Script(
            id=_make_script_id(batch_id, index),
            saved=False,
            **generated.model_dump(),
        )
        for index, generated in enumerate(response.scripts)
    ]


def make_history_item(
    product_link: str,
    scripts: Sequence[Script],
    timestamp_ms: int,
) -> HistoryItem:
    """History entry for one generation run."""
    return HistoryItem(
        id=f"gen-{timestamp_ms}",
        timestamp=timestamp_ms,
        product_link=product_link,
        scripts=list(scripts),
    )


def _make_script_id(batch_id: str, index: int) -> str:
    digest = hashlib.sha256(f"{batch_id}:{index}".encode("utf-8")).hexdigest()
    return f"scr_{digest[:16]}"
