"""cdm-metagen: Converter from Rosetta CDM schemas to DAML type declarations.

This package provides tools for:
- Loading and validating parsed Rosetta schemas (YAML/JSON)
- Normalizing class/enum hierarchies into a flat type model (IR)
- Rendering the type model as a DAML module

Quick Start:
    >>> from pathlib import Path
    >>> from cdm_metagen.models import load_schema
    >>> from cdm_metagen.pipeline import convert_schema
    >>>
    >>> schema = load_schema(Path("cdm.yaml"))
    >>> source = convert_schema("Org.Isda.Cdm", schema)
    >>> Path("Cdm.daml").write_text(source)

Modules:
    models: Pydantic models for the parsed schema
    transform: Schema to IR normalization
    ir: Intermediate Representation (type model)
    validation: Consistency checks on the type model
    render: IR to DAML rendering
    cli: Command-line interface
"""

__version__ = "0.1.0"
