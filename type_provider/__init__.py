"""Provider exposing a `validate_json` data source to a configuration host."""
from .errors import (
    ConfigurationError,
    DataParseError,
    EvaluationError,
    SchemaCompileError,
    SchemaParseError,
    ValidationPolicyError,
)
from .evaluator import EvaluationResult, evaluate
from .provider import TypeProvider, new

__all__ = [
    "ConfigurationError",
    "DataParseError",
    "EvaluationError",
    "EvaluationResult",
    "SchemaCompileError",
    "SchemaParseError",
    "TypeProvider",
    "ValidationPolicyError",
    "evaluate",
    "new",
]
