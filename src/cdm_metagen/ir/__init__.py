"""Intermediate Representation (IR) of the type model.

The IR sits between the parsed Rosetta schema and the DAML output:

1. Inheritance is already flattened, every declaration is self-contained
2. References between declarations are nominal, resolved by name
3. Names are already free of DAML reserved-word collisions
4. Uses frozen dataclasses, the model is immutable once built
"""

from cdm_metagen.ir.module import (
    IRDecl,
    IREnumType,
    IRImport,
    IRModule,
    IRNewType,
    IRQualifiedImport,
    IRRecordType,
    IRTemplateType,
    IRUnqualifiedImport,
    IRVariantType,
)
from cdm_metagen.ir.types import (
    LIST_OF,
    NON_EMPTY_LIST_OF,
    ONE_OF,
    OPTIONAL,
    IRCardinality,
    IRConstructor,
    IREnum,
    IRField,
    IRLower,
    IRNominal,
    IRPrim,
    IRPrimType,
    IRProduct,
    IRSum,
    IRType,
    IRUpper,
)

__all__ = [
    # Types
    "IRPrimType",
    "IRLower",
    "IRUpper",
    "IRCardinality",
    "ONE_OF",
    "OPTIONAL",
    "LIST_OF",
    "NON_EMPTY_LIST_OF",
    "IRPrim",
    "IRNominal",
    "IRProduct",
    "IREnum",
    "IRSum",
    "IRType",
    "IRField",
    "IRConstructor",
    # Declarations
    "IRDecl",
    "IREnumType",
    "IRRecordType",
    "IRVariantType",
    "IRNewType",
    "IRTemplateType",
    # Modules
    "IRImport",
    "IRUnqualifiedImport",
    "IRQualifiedImport",
    "IRModule",
]
