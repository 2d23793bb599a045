"""Render an IR module as DAML source text."""

from __future__ import annotations

from typing import Callable

from cdm_metagen.config import ConverterConfig, EmptyVariantPolicy
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
    ONE_OF,
    IRCardinality,
    IREnum,
    IRField,
    IRNominal,
    IRPrim,
    IRPrimType,
    IRProduct,
    IRSum,
    IRType,
)
from cdm_metagen.logging_config import get_logger
from cdm_metagen.render.layout import (
    CommentPosition,
    hang,
    join_blocks,
    nest,
    paragraph_fill,
    render_comment,
)

logger = get_logger(__name__)

DERIVING = "deriving (Eq, Ord, Show)"

# Mapping from IR primitive kinds to DAML built-in types
PRIM_TYPE_TO_DAML: dict[IRPrimType, str] = {
    IRPrimType.TEXT: "Text",
    IRPrimType.BOOL: "Bool",
    IRPrimType.INTEGER: "Int",
    IRPrimType.DECIMAL: "Decimal",
    IRPrimType.TIME: "Time",
    IRPrimType.DATE: "Date",
    IRPrimType.UNIT: "Unit",
    IRPrimType.PARTY: "Party",
}


class RenderError(Exception):
    """Raised when a module cannot be rendered."""


class UnsupportedTypeError(RenderError):
    """Raised for anonymous enum and sum types, which have no DAML form."""

    def __init__(self, ir_type: IRType) -> None:
        """Initialize with the offending type.

        Args:
        ----
            ir_type: The anonymous type.

        """
        self.ir_type = ir_type
        kind = "enum" if isinstance(ir_type, IREnum) else "sum"
        super().__init__(f"Anonymous {kind} types not currently supported")


class EmptyVariantError(RenderError):
    """Raised for a variant without alternatives when configured to fail."""

    def __init__(self, name: str) -> None:
        """Initialize with the declaration name."""
        self.name = name
        super().__init__(f"Variant {name} has no alternatives")


def _identity(doc: str) -> str:
    return doc


def _parens(doc: str) -> str:
    return f"({doc})"


class DamlRenderer:
    """Serialize IR modules to DAML.

    Declarations are rendered in module order, separated by a blank line.
    Rendering builds the complete text before returning it, so a failure
    never yields partial output.

    Usage:
        renderer = DamlRenderer()
        source = renderer.render(module)
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        """Initialize the renderer.

        Args:
        ----
            config: Rendering settings, defaults if omitted.

        """
        self.config = config or ConverterConfig()

    def render(self, module: IRModule) -> str:
        """Render a module to source text.

        Args:
        ----
            module: A well-formed IR module.

        Returns:
        -------
            The DAML source, newline terminated.

        Raises:
        ------
            UnsupportedTypeError: If a field uses an anonymous enum or sum.
            EmptyVariantError: If a variant is empty and the policy is ERROR.

        """
        lines = self.render_module(module)
        logger.debug("Rendered module %s: %d lines", module.name, len(lines))
        return "\n".join(lines) + "\n"

    def render_module(self, module: IRModule) -> list[str]:
        """Render a module to lines."""
        header = [f"-- {line}" for line in self._fill(module.comment)]
        header += [
            f"module {module.name}",
            f"  ( module {module.name} ) where",
        ]

        blocks = [header]
        if module.imports:
            blocks.append(join_blocks([[render_import(imp)] for imp in module.imports]))
        if module.decls:
            blocks.append(join_blocks([self.render_decl(decl) for decl in module.decls]))
        return join_blocks(blocks)

    def render_decl(self, decl: IRDecl) -> list[str]:
        """Render one declaration, unknown kinds become a diagnostic comment."""
        if isinstance(decl, IREnumType):
            return self._render_enum(decl)
        if isinstance(decl, IRRecordType):
            return self._render_record(decl)
        if isinstance(decl, IRVariantType):
            return self._render_variant(decl)
        if isinstance(decl, IRNewType):
            return self._render_newtype(decl)
        if isinstance(decl, IRTemplateType):
            return self._render_template(decl)

        logger.warning("Unsupported declaration %s", type(decl).__name__)
        return [f"-- UNSUPPORTED: {decl!r}".replace("\n", " ")]

    def _render_enum(self, decl: IREnumType) -> list[str]:
        if not decl.constructors:
            return self._render_placeholder(decl.name, decl.comment)

        constructors = [
            [f"{decl.name}_{c.name} ()", *self._comment(c.comment, CommentPosition.AFTER)]
            for c in decl.constructors
        ]
        return [
            *self._comment(decl.comment, CommentPosition.BEFORE),
            f"data {decl.name}",
            *nest(4, render_block(constructors)),
        ]

    def _render_record(self, decl: IRRecordType) -> list[str]:
        return [
            *self._comment(decl.comment, CommentPosition.BEFORE),
            f"data {decl.name} = {decl.name} with",
            *nest(4, self._render_fields(decl.fields)),
            *nest(6, [DERIVING]),
        ]

    def _render_variant(self, decl: IRVariantType) -> list[str]:
        if not decl.alternatives:
            return self._render_placeholder(decl.name, decl.comment)

        alternatives = [
            [
                f"{decl.name}_{alt.name} {render_type(alt.type, alt.cardinality, _parens)}",
                *self._comment(alt.comment, CommentPosition.AFTER),
            ]
            for alt in decl.alternatives
        ]
        return [
            *self._comment(decl.comment, CommentPosition.BEFORE),
            f"data {decl.name}",
            *nest(4, render_block(alternatives)),
        ]

    def _render_placeholder(self, name: str, comment: str | None) -> list[str]:
        if self.config.empty_variant == EmptyVariantPolicy.ERROR:
            raise EmptyVariantError(name)

        logger.warning("Rendering empty %s as a placeholder constructor", name)
        return [
            *self._comment(comment, CommentPosition.BEFORE),
            f"data {name} = {name} ()",
            *nest(4, [DERIVING]),
        ]

    def _render_newtype(self, decl: IRNewType) -> list[str]:
        # Emitted as a type synonym, not a distinct nominal wrapper
        return [
            *self._comment(decl.comment, CommentPosition.BEFORE),
            f"type {decl.name} = {render_type(decl.base_type, ONE_OF, _identity)}",
        ]

    def _render_template(self, decl: IRTemplateType) -> list[str]:
        return [
            *self._comment(decl.comment, CommentPosition.BEFORE),
            f"template {decl.name} with",
            *nest(4, self._render_fields(decl.fields)),
            "  where",
            f"    signatory {decl.signatory}",
        ]

    def _render_fields(self, fields: tuple[IRField, ...]) -> list[str]:
        lines: list[str] = []
        for f in fields:
            lines.append(f"{f.name} : {render_type(f.type, f.cardinality, _identity)}")
            lines.extend(nest(4, self._comment(f.comment, CommentPosition.AFTER)))
        return lines

    def _comment(self, comment: str | None, position: CommentPosition) -> list[str]:
        return render_comment(comment, position, self.config.text_width)

    def _fill(self, comment: str | None) -> list[str]:
        return paragraph_fill(comment, self.config.text_width) if comment else []


def render_import(imp: IRImport) -> str:
    """Render one import line."""
    if isinstance(imp, IRQualifiedImport):
        return f"import qualified {imp.module} as {imp.alias_prefix}"
    if isinstance(imp, IRUnqualifiedImport):
        return f"import {imp.module}"
    raise RenderError(f"Unknown import: {imp!r}")


def render_block(items: list[list[str]]) -> list[str]:
    """Render constructors as ``= A | B | C`` followed by the deriving clause."""
    lines: list[str] = []
    for i, item in enumerate(items):
        lines.extend(hang("|" if i else "=", item))
    lines.append(DERIVING)
    return lines


def render_type(ir_type: IRType, cardinality: IRCardinality, wrap: Callable[[str], str]) -> str:
    """Render a type shaped by its cardinality.

    Args:
    ----
        ir_type: The type to render.
        cardinality: Occurrence bounds of the field holding the type.
        wrap: Applied to composite types in argument position, parentheses
            for constructor payloads, identity for record fields.

    Returns:
    -------
        The type expression.

    Raises:
    ------
        UnsupportedTypeError: For anonymous enum and sum types.

    """
    if isinstance(ir_type, IRPrim):
        doc = PRIM_TYPE_TO_DAML[ir_type.kind]
    elif isinstance(ir_type, IRNominal):
        doc = ir_type.name
    elif isinstance(ir_type, IRProduct):
        doc = render_tuple(ir_type.fields)
    elif isinstance(ir_type, (IREnum, IRSum)):
        raise UnsupportedTypeError(ir_type)
    else:
        raise RenderError(f"Unknown type: {ir_type!r}")

    return apply_cardinality(cardinality, wrap, doc)


def render_tuple(fields: tuple[IRField, ...]) -> str:
    """Render a product as a tuple of its member types."""
    return "(" + ", ".join(render_type(f.type, f.cardinality, _identity) for f in fields) + ")"


def apply_cardinality(cardinality: IRCardinality, wrap: Callable[[str], str], doc: str) -> str:
    """Wrap a type expression for optional and repeated occurrences."""
    if cardinality.is_many:
        return f"[{doc}]"
    if cardinality.is_optional:
        return wrap(f"Optional {wrap(doc)}")
    return doc
