"""
raml_validate – compile declarative parameter schemas into fast validators.
"""
from .compiler import Shape
from .registry import Registry
from .result import SchemaError, ValidationError, ValidationRecord, ValidationResult
from .validator import Validator, create, validate

__all__ = [
    "Registry",
    "SchemaError",
    "Shape",
    "ValidationError",
    "ValidationRecord",
    "ValidationResult",
    "Validator",
    "create",
    "validate",
]
