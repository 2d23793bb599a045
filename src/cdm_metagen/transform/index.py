"""Read-only lookup index over a parsed schema.

The index is the only way declarations refer to each other: a class names
its base by identifier and the normalizer resolves it here. It is built once
per conversion and checked for inheritance cycles up front, so flattening
always terminates.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from cdm_metagen.logging_config import get_logger
from cdm_metagen.models.schema import ClassDecl, EnumDecl, Schema

logger = get_logger(__name__)


class CyclicInheritanceError(Exception):
    """Raised when a base chain loops back on itself."""

    def __init__(self, kind: str, cycle: list[str]) -> None:
        """Initialize with the offending chain.

        Args:
        ----
            kind: "class" or "enum".
            cycle: Identifiers along the cycle, first one repeated at the end.

        """
        self.kind = kind
        self.cycle = cycle
        super().__init__(f"Cyclic {kind} inheritance: {' -> '.join(cycle)}")


@dataclass(frozen=True)
class SchemaIndex:
    """Identifier lookup for classes and enums, kept in separate maps."""

    classes: Mapping[str, ClassDecl]
    enums: Mapping[str, EnumDecl]

    @classmethod
    def build(cls, schema: Schema) -> SchemaIndex:
        """Index every class and enum of a schema.

        Args:
        ----
            schema: The parsed schema.

        Returns:
        -------
            An immutable SchemaIndex.

        Raises:
        ------
            CyclicInheritanceError: If a class or enum is its own ancestor.

        """
        classes: dict[str, ClassDecl] = {}
        enums: dict[str, EnumDecl] = {}

        for decl in schema.decls:
            if isinstance(decl, ClassDecl):
                target: dict = classes
            elif isinstance(decl, EnumDecl):
                target = enums
            else:
                logger.debug("Ignoring %s declaration %s", decl.kind, decl.name)
                continue

            if decl.name in target:
                logger.warning("Duplicate %s %s, keeping the last one", decl.kind, decl.name)
            target[decl.name] = decl

        check_acyclic("class", {name: c.base for name, c in classes.items()})
        check_acyclic("enum", {name: e.base for name, e in enums.items()})

        logger.debug("Indexed %d classes and %d enums", len(classes), len(enums))
        return cls(classes=MappingProxyType(classes), enums=MappingProxyType(enums))

    def get_class(self, name: str) -> ClassDecl | None:
        """Look up a class by identifier."""
        return self.classes.get(name)

    def get_enum(self, name: str) -> EnumDecl | None:
        """Look up an enum by identifier."""
        return self.enums.get(name)


def check_acyclic(kind: str, bases: Mapping[str, str | None]) -> None:
    """Check that following base references never revisits a declaration.

    Args:
    ----
        kind: Declaration kind, used in the error message.
        bases: Identifier to base identifier (None for roots). Bases that
            are not keys of the mapping end the chain.

    Raises:
    ------
        CyclicInheritanceError: On the first cycle found.

    """
    done: set[str] = set()

    for start in bases:
        if start in done:
            continue

        chain: list[str] = []
        position: dict[str, int] = {}
        current: str | None = start

        while current is not None and current in bases and current not in done:
            if current in position:
                cycle = chain[position[current] :] + [current]
                raise CyclicInheritanceError(kind, cycle)
            position[current] = len(chain)
            chain.append(current)
            current = bases[current]

        done.update(chain)
