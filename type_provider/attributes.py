"""Attribute declarations for data sources.

A data source declares its attributes once. The declaration produces the JSON
Schema a request must satisfy, decodes requests against it, and encodes the
resulting state, so request and response shapes never drift apart.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

from jsonschema import Draft202012Validator

from .errors import ConfigurationError
from .schema import collect_violations

STRING = "string"
BOOL = "bool"

JSON_TYPES = {
    STRING: "string",
    BOOL: "boolean",
}


@dataclass(frozen=True)
class Attribute:
    name: str
    type: str
    markdown_description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False

    @property
    def configurable(self) -> bool:
        return self.required or self.optional

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "markdown_description": self.markdown_description,
            "required": self.required,
            "optional": self.optional,
            "computed": self.computed,
        }


class AttributeSchema:
    def __init__(self, attributes: Iterable[Attribute], markdown_description: str = ""):
        self.attributes: List[Attribute] = list(attributes)
        self.markdown_description = markdown_description
        for attr in self.attributes:
            if attr.type not in JSON_TYPES:
                raise ConfigurationError(f"attribute {attr.name!r} has unsupported type {attr.type!r}")
            if not (attr.required or attr.optional or attr.computed):
                raise ConfigurationError(f"attribute {attr.name!r} must be required, optional or computed")

    @property
    def names(self) -> List[str]:
        return [a.name for a in self.attributes]

    def config_schema(self) -> Dict[str, Any]:
        """JSON Schema for a request: configurable attributes only, no extras."""
        properties = {}
        for attr in self.attributes:
            if not attr.configurable:
                continue
            json_type = JSON_TYPES[attr.type]
            properties[attr.name] = {
                "type": json_type if attr.required else [json_type, "null"],
                "description": attr.markdown_description,
            }
        return {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "type": "object",
            "properties": properties,
            "required": [a.name for a in self.attributes if a.required],
            "additionalProperties": False,
        }

    def decode_config(self, raw: Any) -> Dict[str, Any]:
        """Validate a raw request and return a value for every attribute.

        Unset optional and computed attributes decode to None.
        """
        validator = Draft202012Validator(self.config_schema())
        violations = collect_violations(validator, raw)
        if violations:
            raise ConfigurationError("invalid configuration\n" + "\n".join(violations))
        return {a.name: raw.get(a.name) for a in self.attributes}

    def encode_state(self, values: Dict[str, Any]) -> Dict[str, Any]:
        return {a.name: values.get(a.name) for a in self.attributes}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "markdown_description": self.markdown_description,
            "attributes": [a.to_dict() for a in self.attributes],
        }
