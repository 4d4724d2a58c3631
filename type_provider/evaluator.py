"""Evaluate a JSON document against a JSON Schema.

Each call parses both documents, compiles the schema, validates, and maps the
outcome onto an `EvaluationResult` or one of the `EvaluationError` kinds.
Nothing is cached between calls.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from jsonschema.exceptions import SchemaError
from referencing.exceptions import Unresolvable

from .errors import DataParseError, SchemaCompileError, SchemaParseError, ValidationPolicyError
from .schema import SCHEMA_REF, collect_violations, compile_schema, format_violations, parse_json_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    json_schema: str
    json_object: str
    fail_on_validation_error: bool
    is_valid: bool
    validation_errors: Optional[str] = None


def evaluate(schema_text: str, data_text: str, fail_on_validation_error: bool = False) -> EvaluationResult:
    """Check `data_text` against the schema in `schema_text`.

    Malformed schema or data text and uncompilable schemas always raise. A
    document that violates the schema is reported through the result, or
    raised as `ValidationPolicyError` when `fail_on_validation_error` is set.
    """
    try:
        schema = parse_json_text(schema_text)
    except ValueError as e:
        raise SchemaParseError(f"Unable to read schema, got error: {e}") from e

    try:
        data = parse_json_text(data_text)
    except ValueError as e:
        raise DataParseError(f"Unable to read data, got error: {e}") from e

    try:
        validator = compile_schema(schema, SCHEMA_REF)
    except SchemaError as e:
        raise SchemaCompileError(f"Unable to compile schema, got error: {e.message}") from e

    try:
        violations = collect_violations(validator, data)
    except Unresolvable as e:
        raise SchemaCompileError(f"Unable to compile schema, got error: unresolvable reference {e}") from e
    except ValueError as e:
        raise SchemaCompileError(f"Unable to compile schema, got error: {e}") from e

    if not violations:
        logger.debug("document is valid against %s", SCHEMA_REF)
        return EvaluationResult(
            json_schema=schema_text,
            json_object=data_text,
            fail_on_validation_error=fail_on_validation_error,
            is_valid=True,
        )

    summary = format_violations(violations, SCHEMA_REF)
    logger.debug("document has %d violation(s) against %s", len(violations), SCHEMA_REF)
    if fail_on_validation_error:
        raise ValidationPolicyError(summary)

    return EvaluationResult(
        json_schema=schema_text,
        json_object=data_text,
        fail_on_validation_error=fail_on_validation_error,
        is_valid=False,
        validation_errors=summary,
    )
