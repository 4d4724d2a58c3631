"""JSON parsing and JSON Schema helpers used by the `validate_json` data source.

Wraps the `jsonschema` library: `parse_json_text` turns raw text into JSON
values, `compile_schema` checks a schema document against its dialect's
metaschema and binds it to a validator, and `collect_violations` renders the
errors a validator reports for an instance into stable, human-readable lines.
"""
import json
from typing import Any, Iterable, List

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError, ValidationError
from jsonschema.validators import validator_for
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012


SCHEMA_REF = "schema.json"

JSON_TYPE_NAMES = (
    (bool, "boolean"),
    (int, "integer"),
    (float, "number"),
    (str, "string"),
    (list, "array"),
    (dict, "object"),
)


def _reject_constant(name: str):
    raise ValueError(f"invalid literal {name!r}")


def describe_decode_error(exc: json.JSONDecodeError) -> str:
    """Describe a decode failure by the character the parser stopped at."""
    if exc.pos >= len(exc.doc):
        return f"unexpected end of JSON input at line {exc.lineno} column {exc.colno}"
    char = exc.doc[exc.pos]
    return f"invalid character {char!r} at line {exc.lineno} column {exc.colno}: {exc.msg}"


def parse_json_text(text: str) -> Any:
    """Parse `text` as strict JSON. Raise ValueError describing the problem."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ValueError(describe_decode_error(e)) from e
    except RecursionError:
        raise ValueError("exceeded max depth") from None


def json_type(value: Any) -> str:
    if value is None:
        return "null"
    for python_type, name in JSON_TYPE_NAMES:
        if isinstance(value, python_type):
            return name
    return type(value).__name__


def json_pointer(path: Iterable) -> str:
    parts = [str(p).replace("~", "~0").replace("/", "~1") for p in path]
    return "".join(f"/{p}" for p in parts)


def _quote(value: Any) -> str:
    if isinstance(value, str):
        return f"'{value}'"
    return json.dumps(value)


def describe_error(error: ValidationError) -> str:
    keyword = error.validator
    expected = error.validator_value
    if keyword == "enum":
        return "value must be one of " + ", ".join(_quote(v) for v in expected)
    if keyword == "const":
        return f"value must be {_quote(expected)}"
    if keyword == "type":
        wanted = [expected] if isinstance(expected, str) else list(expected)
        return f"got {json_type(error.instance)}, want {' or '.join(wanted)}"
    if keyword in ("anyOf", "oneOf") and error.context:
        return f"{keyword} failed"
    return error.message


def render_error(error: ValidationError, depth: int = 0) -> List[str]:
    """Render an error, and the sub-errors of anyOf/oneOf, as bullet lines."""
    indent = "  " * depth
    lines = [f"{indent}- at '{json_pointer(error.absolute_path)}': {describe_error(error)}"]
    if error.validator in ("anyOf", "oneOf"):
        for sub in error.context or ():
            lines.extend(render_error(sub, depth + 1))
    return lines


def _missing_properties(error: ValidationError) -> List[str]:
    instance = error.instance if isinstance(error.instance, dict) else {}
    return [name for name in error.validator_value if name not in instance]


def _missing_message(names: List[str]) -> str:
    quoted = ", ".join(_quote(n) for n in names)
    if len(names) == 1:
        return f"missing property {quoted}"
    return f"missing properties {quoted}"


def _by_location(errors: Iterable[ValidationError]) -> List[ValidationError]:
    # stable: errors at one location keep the validator's order
    return sorted(errors, key=lambda e: json_pointer(e.absolute_path))


def compile_schema(schema: Any, ref: str = SCHEMA_REF):
    """Check `schema` against its metaschema and return a bound validator.

    The dialect comes from `$schema` and defaults to draft 2020-12. The
    document is registered under `ref` so it can refer to itself by that
    name. Raises `jsonschema.exceptions.SchemaError` listing every problem.
    """
    if not isinstance(schema, (dict, bool)):
        raise SchemaError(
            f"'{ref}' is not a schema\n- at '': got {json_type(schema)}, want object or boolean"
        )

    validator_class = validator_for(schema, default=Draft202012Validator)
    # the format checker asserts `regex` for pattern and patternProperties
    meta_validator = validator_class(validator_class.META_SCHEMA, format_checker=validator_class.FORMAT_CHECKER)
    problems = _by_location(meta_validator.iter_errors(schema))
    if problems:
        metaschema = validator_class.META_SCHEMA.get("$id", "")
        lines = [f"'{ref}' is not valid against metaschema '{metaschema}'"]
        for problem in problems:
            lines.extend(render_error(problem))
        raise SchemaError("\n".join(lines))

    resource = Resource.from_contents(schema, default_specification=DRAFT202012)
    registry = Registry().with_resource(ref, resource)
    return validator_class(schema, registry=registry)


def collect_violations(validator, instance: Any) -> List[str]:
    """Return one rendered entry per violation, grouped by instance location.

    Missing `required` properties reported by one keyword at one location are
    folded into a single "missing properties" entry. An empty list means the
    instance is valid. Unresolvable references propagate as
    `referencing.exceptions.Unresolvable`; a schema that recurses without
    bound raises ValueError.
    """
    try:
        errors = _by_location(validator.iter_errors(instance))
    except RecursionError:
        raise ValueError("exceeded max depth while applying schema") from None

    entries = []
    seen_required = set()
    for error in errors:
        location = json_pointer(error.absolute_path)
        if error.validator == "required":
            key = (location, tuple(error.absolute_schema_path))
            if key in seen_required:
                continue
            seen_required.add(key)
            entries.append(f"- at '{location}': {_missing_message(_missing_properties(error))}")
            continue
        entries.append("\n".join(render_error(error)))
    return entries


def format_violations(violations: List[str], ref: str = SCHEMA_REF) -> str:
    lines = [f"jsonschema validation failed with '{ref}#'"]
    lines.extend(violations)
    return "\n".join(lines)
