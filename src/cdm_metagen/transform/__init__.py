"""Schema to IR (Intermediate Representation) transformation module.

This module normalizes a parsed Rosetta schema into the flat type model that
the DAML renderer consumes.

The transformation process:
    1. Index classes and enums by identifier, rejecting inheritance cycles
    2. Flatten each class/enum by inlining its ancestors, base members first
    3. Inject synthetic fields into well-known classes
    4. Drop fields that may never be present (0..0)
    5. Map primitive types, cardinalities and clashing identifiers

Primary Class:
    SchemaToIRTransformer: Main transformer class

Example:
-------
    >>> from cdm_metagen.models import load_schema
    >>> from cdm_metagen.transform import SchemaToIRTransformer
    >>>
    >>> schema = load_schema(Path("cdm.yaml"))
    >>> module = SchemaToIRTransformer().transform("Org.Isda.Cdm", schema)
    >>> print(f"Declarations: {len(module.decls)}")
"""

from cdm_metagen.transform.index import CyclicInheritanceError, SchemaIndex
from cdm_metagen.transform.transformer import (
    SchemaToIRTransformer,
    flatten_class,
    flatten_enum,
)

__all__ = [
    "CyclicInheritanceError",
    "SchemaIndex",
    "SchemaToIRTransformer",
    "flatten_class",
    "flatten_enum",
]
