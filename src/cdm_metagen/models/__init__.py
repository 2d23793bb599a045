"""Pydantic models for the parsed Rosetta CDM schema.

The Rosetta grammar parser is an external collaborator; these models describe
the schema AST it produces, serialized as YAML or JSON. They are used for:

- Loading and validating schema files
- Type-safe access to classes, enums and their fields
- Building the read-only index consumed by the normalizer

Primary Entry Points:
    load_schema(path): Load and validate a YAML/JSON schema file
    validate_schema_file(path): Validate and return list of errors
    Schema: Root model for the entire document

Example:
-------
    >>> from cdm_metagen.models import load_schema
    >>> schema = load_schema(Path("cdm.yaml"))
    >>> print(f"Classes: {len(schema.classes)}")

Model Hierarchy:
    Schema (root)
    ├── ClassDecl - class with optional base, fields and tags
    │   └── ClassField - attribute with type, cardinality and tags
    ├── EnumDecl - enum with optional base and values
    │   └── EnumValue - payload-free tag
    └── OtherDecl - any other declaration kind (ignored)
"""

from cdm_metagen.models.common import (
    UpperBound,
    parse_range,
    parse_upper_bound,
    serialize_upper_bound,
)
from cdm_metagen.models.loader import (
    LoaderError,
    load_schema,
    load_yaml_file,
    validate_schema_file,
)
from cdm_metagen.models.schema import (
    Cardinality,
    ClassDecl,
    ClassField,
    ClassTag,
    EnumDecl,
    EnumValue,
    FieldTag,
    OtherDecl,
    Schema,
    SchemaDecl,
)

__all__ = [
    # Common types
    "UpperBound",
    "parse_range",
    "parse_upper_bound",
    "serialize_upper_bound",
    # Schema models
    "Schema",
    "SchemaDecl",
    "ClassDecl",
    "ClassField",
    "ClassTag",
    "EnumDecl",
    "EnumValue",
    "FieldTag",
    "OtherDecl",
    "Cardinality",
    # Loader utilities
    "LoaderError",
    "load_schema",
    "load_yaml_file",
    "validate_schema_file",
]
