"""Shared test fixtures for validation tests."""

import pytest
from cdm_metagen.ir.module import IREnumType, IRModule, IRRecordType, IRVariantType
from cdm_metagen.ir.types import (
    LIST_OF,
    OPTIONAL,
    IRConstructor,
    IRField,
    IRNominal,
    IRPrim,
    IRPrimType,
)


@pytest.fixture
def valid_module() -> IRModule:
    """Return a module whose references all resolve."""
    return IRModule(
        "Cdm.Valid",
        decls=(
            IREnumType("Status", (IRConstructor("Open"), IRConstructor("Closed"))),
            IRRecordType(
                "Trade",
                (
                    IRField("amount", IRPrim(IRPrimType.DECIMAL)),
                    IRField("status", IRNominal("Status"), OPTIONAL),
                ),
            ),
            IRVariantType("Event", (IRField("Trade", IRNominal("Trade"), LIST_OF),)),
        ),
    )


@pytest.fixture
def module_with_unresolved() -> IRModule:
    """Return a module referencing an undeclared type."""
    return IRModule(
        "Cdm.Broken",
        decls=(IRRecordType("Trade", (IRField("product", IRNominal("Product")),)),),
    )


@pytest.fixture
def module_with_reserved_field() -> IRModule:
    """Return a module with a field named like a DAML keyword."""
    return IRModule(
        "Cdm.Reserved",
        decls=(IRRecordType("Trade", (IRField("key", IRPrim(IRPrimType.TEXT)),)),),
    )
