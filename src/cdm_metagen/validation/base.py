"""Base validator class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from cdm_metagen.validation.errors import ValidationResult

if TYPE_CHECKING:
    from cdm_metagen.ir.module import IRModule


class BaseValidator(ABC):
    """Base class for validators."""

    @abstractmethod
    def validate(
        self,
        module: IRModule,
        result: ValidationResult,
    ) -> None:
        """Validate the module and add issues to result.

        Args:
        ----
            module: The IR module to validate.
            result: The result object to add issues to.

        """
        ...


class CompositeValidator(BaseValidator):
    """Combines multiple validators."""

    def __init__(self, validators: list[BaseValidator] | None = None) -> None:
        """Initialize with optional list of validators.

        Args:
        ----
            validators: List of validators to combine.

        """
        self.validators = validators or []

    def add(self, validator: BaseValidator) -> None:
        """Add a validator."""
        self.validators.append(validator)

    def validate(
        self,
        module: IRModule,
        result: ValidationResult,
    ) -> None:
        """Run all validators in order."""
        for validator in self.validators:
            validator.validate(module, result)
