"""Validators for naming and structural consistency of a module."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from cdm_metagen.ir.module import IREnumType, IRVariantType
from cdm_metagen.transform.naming import is_reserved
from cdm_metagen.validation.base import BaseValidator
from cdm_metagen.validation.errors import ErrorCodes, ValidationResult
from cdm_metagen.validation.reference_validators import decl_fields

if TYPE_CHECKING:
    from cdm_metagen.ir.module import IRModule


class DuplicateDeclarationValidator(BaseValidator):
    """Validates that declaration names are unique after renaming."""

    def validate(
        self,
        module: IRModule,
        result: ValidationResult,
    ) -> None:
        """Report every name declared more than once."""
        counts = Counter(module.decl_names)
        for name, count in counts.items():
            if count > 1:
                result.add_error(
                    code=ErrorCodes.E101_DUPLICATE_DECLARATION,
                    message=f"Declaration '{name}' is defined {count} times",
                    path=name,
                    suggestion="Check the schema for classes or enums renamed to the same name",
                    count=count,
                )


class DuplicateFieldValidator(BaseValidator):
    """Validates that field and enum tag names are unique within a declaration."""

    def validate(
        self,
        module: IRModule,
        result: ValidationResult,
    ) -> None:
        """Report fields and enum tags repeated after inheritance was flattened."""
        for decl in module.decls:
            if isinstance(decl, IREnumType):
                self._check(result, decl.name, "constructors", [c.name for c in decl.constructors])
            else:
                self._check(result, decl.name, "fields", [f.name for f in decl_fields(decl)])

    @staticmethod
    def _check(result: ValidationResult, owner: str, part: str, names: list[str]) -> None:
        for name, count in Counter(names).items():
            if count > 1:
                result.add_error(
                    code=ErrorCodes.E102_DUPLICATE_FIELD,
                    message=f"'{name}' appears {count} times in '{owner}'",
                    path=f"{owner}.{part}.{name}",
                    suggestion="A declaration may redeclare a member of one of its bases",
                )


class ReservedWordValidator(BaseValidator):
    """Warns about DAML keywords the rename tables do not cover."""

    def validate(
        self,
        module: IRModule,
        result: ValidationResult,
    ) -> None:
        """Check declaration and field names."""
        for decl in module.decls:
            if is_reserved(decl.name):
                self._report(result, decl.name, decl.name)
            for f in decl_fields(decl):
                if is_reserved(f.name):
                    self._report(result, f.name, f"{decl.name}.fields.{f.name}")

    @staticmethod
    def _report(result: ValidationResult, name: str, path: str) -> None:
        result.add_warning(
            code=ErrorCodes.W005_RESERVED_WORD,
            message=f"'{name}' is a DAML keyword",
            path=path,
            suggestion="Add the name to the rename tables",
        )


class EmptyVariantValidator(BaseValidator):
    """Warns about enums and variants that will render as placeholders."""

    def validate(
        self,
        module: IRModule,
        result: ValidationResult,
    ) -> None:
        """Check enums without constructors and variants without alternatives."""
        for decl in module.decls:
            empty = (isinstance(decl, IRVariantType) and not decl.alternatives) or (
                isinstance(decl, IREnumType) and not decl.constructors
            )
            if empty:
                result.add_warning(
                    code=ErrorCodes.W006_EMPTY_VARIANT,
                    message=f"'{decl.name}' has no constructors, a placeholder is emitted",
                    path=decl.name,
                )
