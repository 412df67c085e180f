"""Strict validation of generated plan documents against the output schema."""

import json

from ..errors import GenerationError, GenerationErrorKind
from ..models.plan import FitnessPlan
from .output_specs import ARRAY, INTEGER, NUMBER, OBJECT, STRING


def _type_ok(value, type_: str) -> bool:
    if type_ == OBJECT:
        return isinstance(value, dict)
    if type_ == ARRAY:
        return isinstance(value, list)
    if type_ == STRING:
        return isinstance(value, str)
    if type_ == NUMBER:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if type_ == INTEGER:
        if isinstance(value, bool):
            return False
        return isinstance(value, int) or (isinstance(value, float) and value.is_integer())
    return True


def validate_document(document, schema: dict, path: str = "") -> list[str]:
    """Check a decoded document against a schema.

    Walks required fields, types and nullability. Array cardinalities
    (two meal alternatives, exercise counts) are requested in the prompt
    and schema but not enforced here.

    Returns:
        List of problems as "path: message"; empty when valid
    """
    location = path or "/"
    if document is None:
        if schema.get("nullable"):
            return []
        return [f"{location}: must not be null"]

    type_ = str(schema.get("type", "")).upper()
    if type_ and not _type_ok(document, type_):
        return [f"{location}: expected {type_.lower()}, got {type(document).__name__}"]

    problems = []
    if type_ == OBJECT:
        properties = schema.get("properties", {})
        for key in schema.get("required", []):
            if key not in document:
                problems.append(f"{path}/{key}: missing required field")
        for key, sub_schema in properties.items():
            if key in document:
                problems.extend(validate_document(document[key], sub_schema, f"{path}/{key}"))
    elif type_ == ARRAY and "items" in schema:
        for i, item in enumerate(document):
            problems.extend(validate_document(item, schema["items"], f"{path}/{i}"))
    return problems


def parse_plan_response(text: str | None, schema: dict) -> FitnessPlan:
    """Decode and validate a response body into a FitnessPlan.

    Raises:
        GenerationError: EMPTY_RESPONSE for a missing body, SCHEMA_MISMATCH
            for undecodable JSON or a document failing validation
    """
    if text is None or not text.strip():
        raise GenerationError(GenerationErrorKind.EMPTY_RESPONSE, "No response generated")

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise GenerationError(
            GenerationErrorKind.SCHEMA_MISMATCH, f"Response is not valid JSON ({e.msg})"
        ) from e

    problems = validate_document(document, schema)
    if problems:
        raise GenerationError(
            GenerationErrorKind.SCHEMA_MISMATCH,
            "Response does not match the plan schema",
            problems=problems,
        )

    return FitnessPlan.from_dict(document)
