import jsonschema

from .schema_loader import load_schema


def validate_generator_response(data: dict) -> None:
    """Validate a raw generator reply against the GeneratorResponse.v1.json contract.

    Raises jsonschema.ValidationError if non-conformant.
    """
    schema = load_schema("GeneratorResponse.v1.json")
    jsonschema.validate(data, schema)


def validate_term_map(data: dict) -> None:
    """Validate a term-map document against the TermMap.v1.json contract.

    Accepts both the wrapped form ``{"terms": {...}}`` and a bare
    ``{term: replacement}`` object.

    Raises jsonschema.ValidationError if non-conformant.
    """
    schema = load_schema("TermMap.v1.json")
    jsonschema.validate(data, schema)
