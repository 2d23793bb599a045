"""Conversion entry point: schema -> type model -> DAML text."""

from __future__ import annotations

from cdm_metagen.config import ConverterConfig
from cdm_metagen.ir.module import IRImport, IRModule, IRQualifiedImport, IRUnqualifiedImport
from cdm_metagen.logging_config import get_logger
from cdm_metagen.models.schema import Schema
from cdm_metagen.render.daml import DamlRenderer
from cdm_metagen.transform.transformer import SchemaToIRTransformer
from cdm_metagen.validation.validator import ModelValidator

logger = get_logger(__name__)


def config_imports(config: ConverterConfig) -> tuple[IRImport, ...]:
    """Build IR imports from the configured import list."""
    return tuple(
        IRQualifiedImport(spec.module, spec.qualified_as)
        if spec.qualified_as
        else IRUnqualifiedImport(spec.module)
        for spec in config.imports
    )


def build_module(
    module_name: str,
    schema: Schema,
    config: ConverterConfig | None = None,
) -> IRModule:
    """Normalize a schema and check the resulting module.

    Args:
    ----
        module_name: Fully qualified name of the generated module.
        schema: The parsed schema.
        config: Converter settings, defaults if omitted.

    Returns:
    -------
        The validated IR module.

    Raises:
    ------
        CyclicInheritanceError: If the schema has a cyclic base chain.
        ModelValidationError: If the module fails its consistency checks.

    """
    config = config or ConverterConfig()
    module = SchemaToIRTransformer(imports=config_imports(config)).transform(module_name, schema)

    result = ModelValidator(strict=config.strict).validate_and_raise(module)
    for issue in result.warnings:
        logger.warning("%s", issue)

    return module


def convert_schema(
    module_name: str,
    schema: Schema,
    config: ConverterConfig | None = None,
) -> str:
    """Convert a parsed schema to DAML source text.

    Args:
    ----
        module_name: Fully qualified name of the generated module.
        schema: The parsed schema.
        config: Converter settings, defaults if omitted.

    Returns:
    -------
        The rendered module. No text is returned on any failure.

    Raises:
    ------
        CyclicInheritanceError: If the schema has a cyclic base chain.
        ModelValidationError: If the module fails its consistency checks.
        RenderError: If the module cannot be rendered.

    """
    config = config or ConverterConfig()
    module = build_module(module_name, schema, config)
    return DamlRenderer(config).render(module)
