"""Consistency checks for generated type model modules."""

from cdm_metagen.validation.errors import (
    ErrorCodes,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)
from cdm_metagen.validation.validator import (
    ModelValidationError,
    ModelValidator,
)

__all__ = [
    "ModelValidator",
    "ErrorCodes",
    "ModelValidationError",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
]
