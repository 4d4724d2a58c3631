"""The `validate_json` data source."""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .attributes import BOOL, STRING, Attribute, AttributeSchema
from .diagnostics import Diagnostics
from .errors import ConfigurationError, EvaluationError
from .evaluator import evaluate

logger = logging.getLogger(__name__)

CONFIGURATION_ERROR = "Configuration Error"


@dataclass
class ReadResponse:
    state: Optional[Dict[str, Any]]
    diagnostics: Diagnostics


class ValidateJsonDataSource:
    """Checks a JSON document against a JSON Schema.

    Schema and data problems are always reported as error diagnostics. Schema
    violations are returned in `is_valid` and `validation_errors`, unless
    `fail_on_validation_error` turns them into an error diagnostic as well.
    """

    type_suffix = "_validate_json"

    schema = AttributeSchema(
        [
            Attribute(
                "json_schema",
                STRING,
                "The expected JSON schema of the provided object - must be valid JSONSchema.",
                required=True,
            ),
            Attribute(
                "json_object",
                STRING,
                "The object to check the type of - must be valid JSON.",
                required=True,
            ),
            Attribute(
                "is_valid",
                BOOL,
                "Whether or not the provided object is valid according to the provided schema.",
                computed=True,
            ),
            Attribute(
                "validation_errors",
                STRING,
                "A human-readable string containing one or more validation errors. "
                "This will always be empty if is_valid is true.",
                computed=True,
            ),
            Attribute(
                "fail_on_validation_error",
                BOOL,
                "Whether or not an error should be raised if any validation errors are discovered.",
                optional=True,
            ),
        ],
        markdown_description="Data source that can be used to validate a JSON object against a JSON schema.",
    )

    def type_name(self, provider_type_name: str) -> str:
        return provider_type_name + self.type_suffix

    def read(self, config: Any) -> ReadResponse:
        diagnostics = Diagnostics()
        try:
            values = self.schema.decode_config(config)
        except ConfigurationError as e:
            diagnostics.add_error(CONFIGURATION_ERROR, str(e))
            return ReadResponse(state=None, diagnostics=diagnostics)

        fail_on_error = bool(values["fail_on_validation_error"])
        try:
            result = evaluate(values["json_schema"], values["json_object"], fail_on_error)
        except EvaluationError as e:
            logger.info("validate_json read failed (%s)", e.kind)
            diagnostics.add_error(e.summary, e.detail)
            return ReadResponse(state=None, diagnostics=diagnostics)

        values["is_valid"] = result.is_valid
        values["validation_errors"] = result.validation_errors
        return ReadResponse(state=self.schema.encode_state(values), diagnostics=diagnostics)
