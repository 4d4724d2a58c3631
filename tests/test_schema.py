import pytest
from jsonschema.exceptions import SchemaError

from type_provider.schema import (
    SCHEMA_REF,
    collect_violations,
    compile_schema,
    format_violations,
    json_pointer,
    json_type,
    parse_json_text,
)


def test_parse_json_text_rejects_trailing_data():
    with pytest.raises(ValueError) as exc_info:
        parse_json_text('{"a": 1} x')
    assert "invalid character 'x' at line 1 column 10" in str(exc_info.value)


def test_parse_json_text_reports_end_of_input():
    with pytest.raises(ValueError) as exc_info:
        parse_json_text("")
    assert "unexpected end of JSON input" in str(exc_info.value)


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_parse_json_text_rejects_non_standard_constants(literal):
    with pytest.raises(ValueError):
        parse_json_text(f"[{literal}]")


def test_json_pointer_escapes_segments():
    assert json_pointer([]) == ""
    assert json_pointer(["a/b", "c~d", 0]) == "/a~1b/c~0d/0"


@pytest.mark.parametrize(
    "value,name",
    [(True, "boolean"), (1, "integer"), (1.5, "number"), ("s", "string"), ([], "array"), ({}, "object"), (None, "null")],
)
def test_json_type(value, name):
    assert json_type(value) == name


def test_compile_schema_lists_every_problem():
    schema = {"properties": {"a": {"type": "nope"}, "b": {"minimum": "zero"}}}
    with pytest.raises(SchemaError) as exc_info:
        compile_schema(schema)
    message = exc_info.value.message
    assert message.startswith(f"'{SCHEMA_REF}' is not valid against metaschema")
    assert "at '/properties/a/type'" in message
    assert "at '/properties/b/minimum': got string, want number" in message


def test_compile_schema_uses_declared_dialect():
    schema = {"$schema": "http://json-schema.org/draft-07/schema#", "type": "string"}
    validator = compile_schema(schema)
    assert type(validator).__name__ == "Draft7Validator"


def test_compiled_schema_can_reference_itself_by_name():
    schema = {
        "type": "object",
        "properties": {"child": {"$ref": "schema.json"}},
        "additionalProperties": False,
    }
    validator = compile_schema(schema)
    assert collect_violations(validator, {"child": {"child": {}}}) == []
    violations = collect_violations(validator, {"child": {"other": 1}})
    assert len(violations) == 1
    assert violations[0].startswith("- at '/child':")


def test_single_missing_property():
    validator = compile_schema({"required": ["title", "director"]})
    assert collect_violations(validator, {"title": "x"}) == ["- at '': missing property 'director'"]


def test_violations_are_grouped_by_location():
    validator = compile_schema({
        "type": "object",
        "properties": {
            "cast": {"type": "array", "items": {"type": "string"}},
            "title": {"type": "string"},
        },
    })
    violations = collect_violations(validator, {"title": 1, "cast": ["a", 2]})
    assert violations == [
        "- at '/cast/1': got integer, want string",
        "- at '/title': got integer, want string",
    ]


def test_any_of_renders_nested_failures():
    validator = compile_schema({"anyOf": [{"type": "string"}, {"enum": [1, 2]}]})
    (violation,) = collect_violations(validator, 3)
    assert violation.splitlines() == [
        "- at '': anyOf failed",
        "  - at '': got integer, want string",
        "  - at '': value must be one of 1, 2",
    ]


def test_format_violations():
    text = format_violations(["- at '': missing property 'a'"])
    assert text == "jsonschema validation failed with 'schema.json#'\n- at '': missing property 'a'"
