"""Error types raised while evaluating a `validate_json` request.

Every evaluation failure is an `EvaluationError`. The concrete class (or its
`kind`) tells the caller what went wrong; `summary` is the category label the
host shows and `detail` carries the full underlying message.
"""


SCHEMA_ERROR = "Schema Error"
VALIDATION_ERROR = "Validation Error"


class TypeProviderError(Exception):
    """Base exception for the type provider."""
    pass


class ConfigurationError(TypeProviderError):
    """Raised for malformed requests and invalid settings."""
    pass


class EvaluationError(TypeProviderError):
    kind = "evaluation"
    summary = SCHEMA_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class SchemaParseError(EvaluationError):
    kind = "schema_parse"


class DataParseError(EvaluationError):
    kind = "data_parse"


class SchemaCompileError(EvaluationError):
    kind = "schema_compile"


class ValidationPolicyError(EvaluationError):
    """The data violates the schema and the caller asked for a hard failure."""
    kind = "validation_policy"
    summary = VALIDATION_ERROR
