"""Converter configuration."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

from cdm_metagen.models.loader import load_yaml_file


class EmptyVariantPolicy(str, Enum):
    """What to do with a variant or enum that has no alternatives."""

    PLACEHOLDER = "placeholder"
    ERROR = "error"


class ImportSpec(BaseModel):
    """An extra import added to the generated module.

    Example:
    -------
        ```yaml
        imports:
          - module: DA.Date
          - module: DA.Map
            qualified_as: Map
        ```

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    module: Annotated[str, Field(min_length=1, description="Module to import")]
    qualified_as: Annotated[
        str | None,
        Field(default=None, description="Import qualified under this prefix"),
    ]


class ConverterConfig(BaseModel):
    """Settings for normalization and rendering."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    line_length: Annotated[
        int,
        Field(default=80, ge=20, description="Maximum line length for comment text"),
    ]
    ribbons_per_line: Annotated[
        float,
        Field(
            default=1.5,
            ge=1.0,
            description="Ratio of line length to text width on a single line",
        ),
    ]
    empty_variant: Annotated[
        EmptyVariantPolicy,
        Field(
            default=EmptyVariantPolicy.PLACEHOLDER,
            description="Render empty variants and enums as a placeholder or fail",
        ),
    ]
    strict: Annotated[
        bool,
        Field(default=False, description="Treat validation warnings as errors"),
    ]
    imports: Annotated[list[ImportSpec], Field(default_factory=list)]

    @property
    def text_width(self) -> int:
        """Maximum number of text characters on one comment line."""
        return min(self.line_length, round(self.line_length / self.ribbons_per_line))


def load_config(path: Path | None = None, **overrides: Any) -> ConverterConfig:
    """Load a configuration file and apply overrides.

    Args:
    ----
        path: Optional YAML/JSON configuration file.
        **overrides: Values taking precedence over the file. None values
            are ignored so unset CLI options do not clobber the file.

    Returns:
    -------
        Validated ConverterConfig.

    Raises:
    ------
        LoaderError: If the file cannot be loaded.
        ValidationError: If the content is invalid.

    """
    data: dict[str, Any] = load_yaml_file(path) if path is not None else {}
    data.update({key: value for key, value in overrides.items() if value is not None})
    return ConverterConfig.model_validate(data)
