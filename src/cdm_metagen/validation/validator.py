"""Main validator combining all consistency rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cdm_metagen.validation.base import CompositeValidator
from cdm_metagen.validation.consistency_validators import (
    DuplicateDeclarationValidator,
    DuplicateFieldValidator,
    EmptyVariantValidator,
    ReservedWordValidator,
)
from cdm_metagen.validation.errors import ValidationResult, ValidationSeverity
from cdm_metagen.validation.reference_validators import NominalReferenceValidator

if TYPE_CHECKING:
    from cdm_metagen.ir.module import IRModule


class ModelValidator:
    """Consistency checks run on an IR module before rendering.

    Combines the reference validator (every nominal type is declared) and
    consistency validators (unique names, reserved words, empty variants).
    """

    def __init__(self, strict: bool = False) -> None:
        """Initialize validator.

        Args:
        ----
            strict: If True, treat warnings as errors.

        """
        self.strict = strict
        self._validator = CompositeValidator(
            [
                NominalReferenceValidator(),
                DuplicateDeclarationValidator(),
                DuplicateFieldValidator(),
                ReservedWordValidator(),
                EmptyVariantValidator(),
            ]
        )

    def validate(self, module: IRModule) -> ValidationResult:
        """Validate a module.

        Args:
        ----
            module: The module to validate.

        Returns:
        -------
            ValidationResult with all issues found.

        """
        result = ValidationResult()
        self._validator.validate(module, result)
        return result

    def validate_and_raise(self, module: IRModule) -> ValidationResult:
        """Validate and raise exception if invalid.

        Args:
        ----
            module: The module to validate.

        Returns:
        -------
            The result, which then holds warnings at most.

        Raises:
        ------
            ModelValidationError: If validation fails.

        """
        result = self.validate(module)

        if not result.is_valid:
            raise ModelValidationError(result)

        if self.strict and result.warnings:
            raise ModelValidationError(result)

        return result


class ModelValidationError(Exception):
    """Raised when a module fails its consistency checks."""

    def __init__(self, result: ValidationResult) -> None:
        """Initialize with validation result.

        Args:
        ----
            result: The validation result containing issues.

        """
        self.result = result
        error_count = len(result.errors)
        warning_count = len(result.warnings)

        parts = []
        if error_count:
            parts.append(f"{error_count} error(s)")
        if warning_count:
            parts.append(f"{warning_count} warning(s)")

        message = f"Validation failed: {', '.join(parts)}"
        first = (result.errors or result.warnings)[:1]
        if first:
            message += f"; first: {first[0]}"
        super().__init__(message)

    def format_issues(self) -> str:
        """Format all issues as a string, errors first."""
        lines = [f"ERROR: {issue}" for issue in self.result.errors]
        lines += [f"WARNING: {issue}" for issue in self.result.warnings]
        return "\n".join(lines)

    @property
    def errors_only(self) -> list[str]:
        """Get only error messages."""
        return [
            str(issue) for issue in self.result.issues if issue.severity == ValidationSeverity.ERROR
        ]
