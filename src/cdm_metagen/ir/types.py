"""IR models for field types and cardinalities.

This module defines the target-agnostic types used by declarations in the
type model. Only nominal references and anonymous products are renderable;
anonymous enums and sums are reserved and rejected by the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class IRPrimType(Enum):
    """Closed set of primitive kinds known to the type model."""

    TEXT = "text"
    BOOL = "bool"
    INTEGER = "integer"
    DECIMAL = "decimal"
    TIME = "time"
    DATE = "date"
    UNIT = "unit"
    PARTY = "party"


class IRLower(Enum):
    """Lower occurrence bound of a field."""

    ZERO = 0
    ONE = 1


class IRUpper(Enum):
    """Upper occurrence bound of a field."""

    TO_ONE = 1
    TO_MANY = 2


@dataclass(frozen=True)
class IRCardinality:
    """Occurrence bounds collapsed to the 2x2 lattice.

    Attributes
    ----------
        lower: Whether the field may be absent (ZERO) or not (ONE).
        upper: Whether the field may repeat (TO_MANY) or not (TO_ONE).

    """

    lower: IRLower
    upper: IRUpper

    @property
    def is_required(self) -> bool:
        """Exactly one occurrence."""
        return self.lower == IRLower.ONE and self.upper == IRUpper.TO_ONE

    @property
    def is_optional(self) -> bool:
        """At most one occurrence."""
        return self.lower == IRLower.ZERO and self.upper == IRUpper.TO_ONE

    @property
    def is_many(self) -> bool:
        """Any number of occurrences, the lower bound is irrelevant."""
        return self.upper == IRUpper.TO_MANY


ONE_OF = IRCardinality(IRLower.ONE, IRUpper.TO_ONE)
OPTIONAL = IRCardinality(IRLower.ZERO, IRUpper.TO_ONE)
LIST_OF = IRCardinality(IRLower.ZERO, IRUpper.TO_MANY)
NON_EMPTY_LIST_OF = IRCardinality(IRLower.ONE, IRUpper.TO_MANY)


@dataclass(frozen=True)
class IRPrim:
    """A primitive type."""

    kind: IRPrimType


@dataclass(frozen=True)
class IRNominal:
    """A reference by name to another declaration of the same module.

    The reference is resolved by lookup, the declaration is not owned.
    """

    name: str


@dataclass(frozen=True)
class IRProduct:
    """Anonymous tuple of fields.

    The only structural type the model supports. Field names are kept so that
    no information is lost compared to a nominal record.
    """

    fields: tuple[IRField, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class IREnum:
    """Anonymous enumeration. Reserved, not renderable."""

    constructors: tuple[IRConstructor, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class IRSum:
    """Anonymous sum type. Reserved, not renderable."""

    alternatives: tuple[IRField, ...] = field(default_factory=tuple)


IRType = Union[IRPrim, IRNominal, IRProduct, IREnum, IRSum]


@dataclass(frozen=True)
class IRField:
    """A named, typed member of a record, variant, template or product.

    Attributes
    ----------
        name: Field name, already free of reserved-word collisions.
        type: The field type.
        cardinality: Occurrence bounds.
        comment: Optional documentation text.
        meta: Opaque provenance of the source format, never interpreted
            by the renderer.

    """

    name: str
    type: IRType
    cardinality: IRCardinality = ONE_OF
    comment: str | None = None
    meta: Any = field(default=None, compare=False)


@dataclass(frozen=True)
class IRConstructor:
    """A payload-free enumeration constructor.

    Attributes
    ----------
        name: Tag name.
        meta: Opaque provenance of the source format.
        comment: Optional documentation text.

    """

    name: str
    meta: Any = field(default=None, compare=False)
    comment: str | None = None


def iter_nominal_names(ir_type: IRType) -> list[str]:
    """Collect every nominal name referenced by a type, products included."""
    if isinstance(ir_type, IRNominal):
        return [ir_type.name]
    if isinstance(ir_type, IRProduct):
        names: list[str] = []
        for member in ir_type.fields:
            names.extend(iter_nominal_names(member.type))
        return names
    if isinstance(ir_type, IRSum):
        names = []
        for alternative in ir_type.alternatives:
            names.extend(iter_nominal_names(alternative.type))
        return names
    return []
