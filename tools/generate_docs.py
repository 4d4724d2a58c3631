#!/usr/bin/env python3
"""Generate data source documentation and request schemas.

For every data source the provider registers, writes a Markdown reference
page under `docs/data-sources/` and the JSON Schema its request must satisfy
under `schemas/`. Both are derived from the attribute declarations.

Run from project root:

    python tools/generate_docs.py
"""
import argparse
import json
from pathlib import Path

from type_provider.provider import TypeProvider

ROOT = Path(__file__).resolve().parents[1]
DOCS_DIR = ROOT / "docs" / "data-sources"
SCHEMA_DIR = ROOT / "schemas"


def render_markdown(type_name, attribute_schema):
    lines = [f"# {type_name} (Data Source)", "", attribute_schema.markdown_description, ""]
    sections = (
        ("Required", [a for a in attribute_schema.attributes if a.required]),
        ("Optional", [a for a in attribute_schema.attributes if a.optional]),
        ("Read-Only", [a for a in attribute_schema.attributes if a.computed and not a.configurable]),
    )
    lines.append("## Schema")
    for title, attrs in sections:
        if not attrs:
            continue
        lines.extend(["", f"### {title}", ""])
        for attr in attrs:
            lines.append(f"- `{attr.name}` ({attr.type.capitalize()}) {attr.markdown_description}")
    lines.append("")
    return "\n".join(lines)


def short_name(type_name, provider):
    return type_name[len(provider.type_name) + 1:]


def generate(provider, docs_dir=DOCS_DIR, schema_dir=SCHEMA_DIR):
    """Write docs and schemas for every data source; return the written paths."""
    docs_dir.mkdir(parents=True, exist_ok=True)
    schema_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for type_name in provider.data_source_names():
        attribute_schema = provider.data_source(type_name).schema
        doc_file = docs_dir / f"{short_name(type_name, provider)}.md"
        doc_file.write_text(render_markdown(type_name, attribute_schema), encoding="utf-8")
        schema_file = schema_dir / f"{type_name}.config.schema.json"
        schema = dict(attribute_schema.config_schema(), title=type_name)
        schema_file.write_text(json.dumps(schema, indent=2) + "\n", encoding="utf-8")
        written.extend([doc_file, schema_file])
    return written


def main(argv=None):
    p = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    p.add_argument("--docs-dir", type=Path, default=DOCS_DIR)
    p.add_argument("--schema-dir", type=Path, default=SCHEMA_DIR)
    args = p.parse_args(argv)
    for path in generate(TypeProvider(), args.docs_dir, args.schema_dir):
        print(f"Wrote {path}")


if __name__ == "__main__":
    main()
