import json

from tools import generate_docs
from type_provider.provider import TypeProvider


def test_generate_writes_docs_and_schema(tmp_path):
    docs_dir, schema_dir = tmp_path / "docs", tmp_path / "schemas"
    written = generate_docs.generate(TypeProvider(), docs_dir, schema_dir)
    assert docs_dir / "validate_json.md" in written

    doc = (docs_dir / "validate_json.md").read_text(encoding="utf-8")
    assert doc.startswith("# type_validate_json (Data Source)")
    assert "### Required" in doc and "### Optional" in doc and "### Read-Only" in doc
    assert "- `json_schema` (String)" in doc
    assert "- `is_valid` (Bool)" in doc

    schema = json.loads((schema_dir / "type_validate_json.config.schema.json").read_text(encoding="utf-8"))
    assert schema["title"] == "type_validate_json"
    assert schema["required"] == ["json_schema", "json_object"]
