"""Main schema to IR transformer."""

from __future__ import annotations

from cdm_metagen.ir.module import (
    IRDecl,
    IREnumType,
    IRImport,
    IRModule,
    IRRecordType,
)
from cdm_metagen.logging_config import get_logger
from cdm_metagen.models.schema import ClassDecl, EnumDecl, Schema
from cdm_metagen.transform.augment import add_synthetic_fields
from cdm_metagen.transform.index import SchemaIndex
from cdm_metagen.transform.naming import convert_type_name
from cdm_metagen.transform.type_converter import (
    convert_class_field,
    convert_enum_value,
    is_zero_cardinality,
)

logger = get_logger(__name__)

MODULE_COMMENT = "Generated by metagen"


class SchemaToIRTransformer:
    """Transform a parsed Rosetta schema to an IR module.

    This is the main entry point of the normalizer: it indexes the schema,
    flattens class and enum inheritance, injects synthetic fields and maps
    names and types to the type model.

    Usage:
        transformer = SchemaToIRTransformer()
        module = transformer.transform("Org.Isda.Cdm", schema)
    """

    def __init__(self, imports: tuple[IRImport, ...] = ()) -> None:
        """Initialize the transformer.

        Args:
        ----
            imports: Imports to place in every generated module.

        """
        self.imports = imports

    def transform(self, name: str, schema: Schema) -> IRModule:
        """Transform a schema into a module.

        Args:
        ----
            name: Fully qualified name of the generated module.
            schema: Validated schema model.

        Returns:
        -------
            IRModule with one record per class and one enum per enum,
            in schema order.

        Raises:
        ------
            CyclicInheritanceError: If the schema has a cyclic base chain.

        """
        index = SchemaIndex.build(schema)

        decls: list[IRDecl] = []
        for decl in schema.decls:
            # Duplicates superseded in the index are skipped
            if isinstance(decl, ClassDecl) and index.get_class(decl.name) is decl:
                decls.append(self._convert_class(index, decl))
            elif isinstance(decl, EnumDecl) and index.get_enum(decl.name) is decl:
                decls.append(self._convert_enum(index, decl))

        logger.info("Converted %d declarations into module %s", len(decls), name)
        return IRModule(
            name=name,
            imports=self.imports,
            decls=tuple(decls),
            comment=MODULE_COMMENT,
        )

    def _convert_class(self, index: SchemaIndex, cls: ClassDecl) -> IRRecordType:
        """Flatten, augment and convert a class to a record."""
        flat = add_synthetic_fields(flatten_class(index, cls))
        fields = tuple(
            convert_class_field(f) for f in flat.fields if not is_zero_cardinality(f.card)
        )
        return IRRecordType(
            name=convert_type_name(cls.name),
            fields=fields,
            comment=cls.annotation,
        )

    def _convert_enum(self, index: SchemaIndex, enum: EnumDecl) -> IREnumType:
        """Flatten and convert an enum."""
        flat = flatten_enum(index, enum)
        return IREnumType(
            name=convert_type_name(enum.name),
            constructors=tuple(convert_enum_value(v) for v in flat.values),
            comment=enum.annotation,
        )


def flatten_class(index: SchemaIndex, cls: ClassDecl) -> ClassDecl:
    """Inline the fields of all ancestors, base fields first.

    Args:
    ----
        index: Schema index, already checked for cycles.
        cls: The class to flatten.

    Returns:
    -------
        A class with the same name and no inheritance left to resolve.

    """
    if cls.base is None:
        return cls

    base = index.get_class(cls.base)
    if base is None:
        logger.warning("Base class %s of %s is not declared, ignoring it", cls.base, cls.name)
        return cls

    inherited = flatten_class(index, base)
    return cls.model_copy(update={"fields": [*inherited.fields, *cls.fields]})


def flatten_enum(index: SchemaIndex, enum: EnumDecl) -> EnumDecl:
    """Inline the values of all ancestor enums, base values first."""
    if enum.base is None:
        return enum

    base = index.get_enum(enum.base)
    if base is None:
        logger.warning("Base enum %s of %s is not declared, ignoring it", enum.base, enum.name)
        return enum

    inherited = flatten_enum(index, base)
    return enum.model_copy(update={"values": [*inherited.values, *enum.values]})
