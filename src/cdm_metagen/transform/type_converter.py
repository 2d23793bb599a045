"""Convert schema field types and cardinalities to IR types."""

from __future__ import annotations

from dataclasses import dataclass

from cdm_metagen.ir.types import (
    IRCardinality,
    IRConstructor,
    IRField,
    IRLower,
    IRNominal,
    IRPrim,
    IRPrimType,
    IRType,
    IRUpper,
)
from cdm_metagen.models.schema import Cardinality, ClassField, EnumValue, FieldTag
from cdm_metagen.transform.naming import convert_field_name, convert_type_name

# Schema type name standing for a DAML party, used by synthetic fields
PARTY_ALIAS = "DamlParty"

# Mapping from schema primitive type names to IR primitive kinds
PRIM_TYPE_TO_IR: dict[str, IRPrimType] = {
    "int": IRPrimType.INTEGER,
    "number": IRPrimType.DECIMAL,
    "boolean": IRPrimType.BOOL,
    "string": IRPrimType.TEXT,
    "date": IRPrimType.DATE,
    "time": IRPrimType.TEXT,  # DAML has no time-of-day type
    "dateTime": IRPrimType.TIME,
    "zonedDateTime": IRPrimType.TIME,
    "calculation": IRPrimType.TEXT,
    "eventType": IRPrimType.TEXT,
    "productType": IRPrimType.TEXT,
    PARTY_ALIAS: IRPrimType.PARTY,
}

# Field tags marking identifier-like fields, always rendered as text
TEXT_FIELD_TAGS = frozenset({FieldTag.KEY, FieldTag.KEY_VALUE, FieldTag.REFERENCE})


@dataclass(frozen=True)
class CdmFieldMeta:
    """Provenance of a record field: original name and declared type."""

    name: str
    type_name: str | None


@dataclass(frozen=True)
class CdmEnumMeta:
    """Provenance of an enum constructor: original tag name."""

    name: str


def convert_type(type_name: str | None) -> IRType:
    """Convert a declared type name to an IR type.

    Args:
    ----
        type_name: The declared type, or None if the field has none.

    Returns:
    -------
        A primitive for known primitive names and for missing types,
        otherwise a nominal reference to the renamed identifier.

    """
    if type_name is None:
        return IRPrim(IRPrimType.TEXT)

    prim = PRIM_TYPE_TO_IR.get(type_name)
    if prim is not None:
        return IRPrim(prim)

    return IRNominal(convert_type_name(type_name))


def convert_cardinality(card: Cardinality) -> IRCardinality:
    """Collapse schema occurrence bounds to the IR lattice.

    Args:
    ----
        card: Schema cardinality.

    Returns:
    -------
        IRCardinality; only an upper bound of exactly 1 is TO_ONE.

    """
    lower = IRLower.ZERO if card.lower == 0 else IRLower.ONE
    upper = IRUpper.TO_ONE if card.upper == 1 else IRUpper.TO_MANY
    return IRCardinality(lower, upper)


def is_zero_cardinality(card: Cardinality) -> bool:
    """True for fields that may never be present, (0..0)."""
    return card.lower == 0 and card.upper == 0


def convert_class_field(class_field: ClassField) -> IRField:
    """Convert a schema class field to an IR field.

    Args:
    ----
        class_field: The schema field.

    Returns:
    -------
        IRField with renamed name, converted type and cardinality.

    """
    if class_field.tags & TEXT_FIELD_TAGS:
        ir_type: IRType = IRPrim(IRPrimType.TEXT)
    else:
        ir_type = convert_type(class_field.type)

    return IRField(
        name=convert_field_name(class_field.name),
        type=ir_type,
        cardinality=convert_cardinality(class_field.card),
        comment=class_field.annotation,
        meta=CdmFieldMeta(name=class_field.name, type_name=class_field.type),
    )


def convert_enum_value(value: EnumValue) -> IRConstructor:
    """Convert a schema enum value to an IR constructor."""
    return IRConstructor(
        name=value.name,
        meta=CdmEnumMeta(name=value.name),
        comment=value.annotation,
    )
