"""Validators for nominal references between declarations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cdm_metagen.ir.module import (
    IRNewType,
    IRRecordType,
    IRTemplateType,
    IRVariantType,
)
from cdm_metagen.ir.types import IRField, iter_nominal_names
from cdm_metagen.validation.base import BaseValidator
from cdm_metagen.validation.errors import ErrorCodes, ValidationResult

if TYPE_CHECKING:
    from cdm_metagen.ir.module import IRModule


def decl_fields(decl: object) -> tuple[IRField, ...]:
    """Fields of records and templates, alternatives of variants."""
    if isinstance(decl, (IRRecordType, IRTemplateType)):
        return decl.fields
    if isinstance(decl, IRVariantType):
        return decl.alternatives
    return ()


class NominalReferenceValidator(BaseValidator):
    """Validates that every nominal type names a declaration of the module."""

    def validate(
        self,
        module: IRModule,
        result: ValidationResult,
    ) -> None:
        """Check field, alternative and alias types, products included."""
        declared = set(module.decl_names)

        for decl in module.decls:
            for member in decl_fields(decl):
                for name in iter_nominal_names(member.type):
                    if name not in declared:
                        self._report(result, name, f"{decl.name}.fields.{member.name}")

            if isinstance(decl, IRNewType):
                for name in iter_nominal_names(decl.base_type):
                    if name not in declared:
                        self._report(result, name, f"{decl.name}.base_type")

    @staticmethod
    def _report(result: ValidationResult, name: str, path: str) -> None:
        result.add_error(
            code=ErrorCodes.E001_UNRESOLVED_REFERENCE,
            message=f"Type '{name}' is referenced but not declared",
            path=path,
            suggestion=f"Declare '{name}' in the schema or map it to a primitive",
            referenced_type=name,
        )
