"""Identifier renaming to avoid clashes with DAML built-ins and keywords."""

from __future__ import annotations

# Schema type names that clash with DAML built-in types
TYPE_RENAMES: dict[str, str] = {
    "Event": "EventData",
    "Contract": "ContractData",
    "Party": "PartyData",
}

# Schema field names that clash with DAML reserved words
FIELD_RENAMES: dict[str, str] = {
    "type": "typ",
    "exercise": "exe",
}

# DAML keywords; used to report collisions the rename tables do not cover
DAML_RESERVED_WORDS = frozenset(
    {
        "agreement",
        "as",
        "case",
        "choice",
        "class",
        "controller",
        "data",
        "deriving",
        "do",
        "else",
        "ensure",
        "exercise",
        "hiding",
        "if",
        "import",
        "in",
        "infix",
        "infixl",
        "infixr",
        "instance",
        "interface",
        "key",
        "let",
        "maintainer",
        "module",
        "nonconsuming",
        "observer",
        "of",
        "preconsuming",
        "postconsuming",
        "qualified",
        "signatory",
        "template",
        "then",
        "type",
        "where",
        "with",
    }
)


def convert_type_name(name: str) -> str:
    """Map a schema class or enum identifier to a safe DAML type name."""
    return TYPE_RENAMES.get(name, name)


def convert_field_name(name: str) -> str:
    """Map a schema field identifier to a safe DAML field name."""
    return FIELD_RENAMES.get(name, name)


def is_reserved(name: str) -> bool:
    """Check if a name is a DAML keyword."""
    return name in DAML_RESERVED_WORDS
