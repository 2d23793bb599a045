"""IR models for declarations, imports and modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from cdm_metagen.ir.types import IRConstructor, IRField, IRType


@dataclass(frozen=True)
class IRUnqualifiedImport:
    """``import Module``."""

    module: str


@dataclass(frozen=True)
class IRQualifiedImport:
    """``import qualified Module as Prefix``."""

    module: str
    alias_prefix: str


IRImport = Union[IRUnqualifiedImport, IRQualifiedImport]


@dataclass(frozen=True)
class IREnumType:
    """Enumeration whose constructors carry no payload."""

    name: str
    constructors: tuple[IRConstructor, ...] = field(default_factory=tuple)
    comment: str | None = None


@dataclass(frozen=True)
class IRRecordType:
    """Record with labelled fields."""

    name: str
    fields: tuple[IRField, ...] = field(default_factory=tuple)
    comment: str | None = None


@dataclass(frozen=True)
class IRVariantType:
    """Tagged union, each alternative's type is its payload.

    An empty alternative list is a degenerate case rendered as a placeholder.
    """

    name: str
    alternatives: tuple[IRField, ...] = field(default_factory=tuple)
    comment: str | None = None


@dataclass(frozen=True)
class IRNewType:
    """Transparent alias of another type."""

    name: str
    base_type: IRType
    comment: str | None = None


@dataclass(frozen=True)
class IRTemplateType:
    """Record with a designated signatory field.

    Attributes
    ----------
        name: Template name.
        fields: Template fields.
        signatory: Name of the field holding the authorizing party.
        comment: Optional documentation text.

    """

    name: str
    fields: tuple[IRField, ...]
    signatory: str
    comment: str | None = None


IRDecl = Union[IREnumType, IRRecordType, IRVariantType, IRNewType, IRTemplateType]


@dataclass(frozen=True)
class IRModule:
    """One output unit: a named module owning its declarations.

    Attributes
    ----------
        name: Fully qualified module name.
        imports: Imports in output order.
        decls: Declarations in output order. Order is cosmetic, every
            reference between declarations is by name.
        comment: Optional header text.

    """

    name: str
    imports: tuple[IRImport, ...] = field(default_factory=tuple)
    decls: tuple[IRDecl, ...] = field(default_factory=tuple)
    comment: str | None = None

    @property
    def decl_names(self) -> list[str]:
        """Names of all declarations, in order, duplicates included."""
        return [decl.name for decl in self.decls]

    def get_decl(self, name: str) -> IRDecl | None:
        """Look up a declaration by name."""
        for decl in self.decls:
            if decl.name == name:
                return decl
        return None
