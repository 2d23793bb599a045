"""Models for the parsed Rosetta schema.

These mirror the schema AST produced by the Rosetta parser. A schema is an
ordered list of declarations; only classes and enums are interpreted, every
other kind is kept as an ``OtherDecl`` and ignored by the normalizer.

Example:
-------
    ```yaml
    namespace: org.isda.cdm
    decls:
      - kind: enum
        name: Status
        base: Common
        values:
          - name: Closed
      - kind: class
        name: Trade
        tags: [key]
        fields:
          - name: amount
            type: number
            card: "1..1"
    ```

"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, model_validator

from cdm_metagen.models.common import UpperBound, parse_range


class ClassTag:
    """Markers carried by class declarations."""

    KEY = "key"
    KEY_VALUE = "keyValue"


class FieldTag:
    """Markers carried by class fields."""

    KEY = "key"
    KEY_VALUE = "keyValue"
    REFERENCE = "reference"


class Cardinality(BaseModel):
    """Occurrence bounds of a field.

    Accepts a mapping ``{lower: 0, upper: "*"}`` or the Rosetta range string
    ``"0..*"`` / ``"(1..1)"``. An upper bound of None means unbounded.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    lower: Annotated[int, Field(default=1, ge=0, description="Minimum occurrences")]
    upper: Annotated[
        UpperBound,
        Field(default=1, description="Maximum occurrences, None if unbounded"),
    ]

    @model_validator(mode="before")
    @classmethod
    def parse_range_string(cls, data: Any) -> Any:
        """Accept the compact Rosetta range syntax."""
        if isinstance(data, str):
            lower, upper = parse_range(data)
            return {"lower": lower, "upper": upper}
        return data

    @model_validator(mode="after")
    def check_bounds(self) -> Cardinality:
        """Ensure lower does not exceed a bounded upper."""
        if self.upper is not None and self.upper < self.lower:
            raise ValueError(f"upper bound {self.upper} is below lower bound {self.lower}")
        return self

    @property
    def is_unbounded(self) -> bool:
        """True if the upper bound is unbounded."""
        return self.upper is None

    def __str__(self) -> str:
        """Format as a Rosetta range."""
        return f"({self.lower}..{'*' if self.upper is None else self.upper})"


class ClassField(BaseModel):
    """A single attribute of a class.

    Example:
    -------
        ```yaml
        - name: tradeDate
          type: date
          card: "1..1"
          tags: [reference]
          annotation: The date the trade was agreed.
        ```

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Annotated[str, Field(min_length=1, description="Attribute name")]
    type: Annotated[
        str | None,
        Field(default=None, description="Declared type name, absent means text"),
    ]
    card: Annotated[Cardinality, Field(default_factory=Cardinality)]
    tags: Annotated[
        frozenset[str],
        Field(default_factory=frozenset, description="Field markers, unknown ones ignored"),
    ]
    annotation: Annotated[str | None, Field(default=None, description="Documentation")]


class ClassDecl(BaseModel):
    """A class declaration, optionally extending one base class."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["class"] = "class"
    name: Annotated[str, Field(min_length=1, description="Class identifier")]
    base: Annotated[str | None, Field(default=None, description="Base class identifier")]
    fields: Annotated[list[ClassField], Field(default_factory=list)]
    tags: Annotated[
        frozenset[str],
        Field(default_factory=frozenset, description="Class markers, unknown ones ignored"),
    ]
    annotation: Annotated[str | None, Field(default=None, description="Documentation")]


class EnumValue(BaseModel):
    """A single tag of an enum."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: Annotated[str, Field(min_length=1, description="Tag identifier")]
    display_name: Annotated[
        str | None,
        Field(default=None, alias="displayName", description="Human-readable name"),
    ]
    annotation: Annotated[str | None, Field(default=None, description="Documentation")]


class EnumDecl(BaseModel):
    """An enum declaration, optionally extending one base enum."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["enum"] = "enum"
    name: Annotated[str, Field(min_length=1, description="Enum identifier")]
    base: Annotated[str | None, Field(default=None, description="Base enum identifier")]
    values: Annotated[list[EnumValue], Field(default_factory=list)]
    annotation: Annotated[str | None, Field(default=None, description="Documentation")]


class OtherDecl(BaseModel):
    """Any other declaration kind (functions, rules, choices...), not interpreted."""

    model_config = ConfigDict(extra="allow", frozen=True)

    kind: str
    name: str | None = None


def _decl_kind(value: Any) -> str:
    """Route a raw or validated declaration to its model."""
    if isinstance(value, dict):
        kind = value.get("kind")
    else:
        kind = getattr(value, "kind", None)
    return kind if kind in ("class", "enum") else "other"


SchemaDecl = Annotated[
    Union[
        Annotated[ClassDecl, Tag("class")],
        Annotated[EnumDecl, Tag("enum")],
        Annotated[OtherDecl, Tag("other")],
    ],
    Discriminator(_decl_kind),
]


class Schema(BaseModel):
    """Root model of a parsed Rosetta schema."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    namespace: Annotated[str | None, Field(default=None, description="Rosetta namespace")]
    decls: Annotated[list[SchemaDecl], Field(default_factory=list)]

    @property
    def classes(self) -> list[ClassDecl]:
        """All class declarations in schema order."""
        return [d for d in self.decls if isinstance(d, ClassDecl)]

    @property
    def enums(self) -> list[EnumDecl]:
        """All enum declarations in schema order."""
        return [d for d in self.decls if isinstance(d, EnumDecl)]

    @property
    def others(self) -> list[OtherDecl]:
        """Declarations of kinds that are not interpreted."""
        return [d for d in self.decls if isinstance(d, OtherDecl)]
