"""Synthetic fields injected into well-known classes.

Some CDM classes need DAML-specific members that have no counterpart in the
schema: parties become DAML parties, message information gains copy-to
parties, and keyed classes gain a text field holding their key. The rules are
kept as data so they can be audited and tested on their own.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from cdm_metagen.models.schema import Cardinality, ClassDecl, ClassField, ClassTag
from cdm_metagen.transform.type_converter import PARTY_ALIAS

SYNTHETIC_FIELD_COMMENT = "field added by metagen"

_ONE_OF = Cardinality(lower=1, upper=1)
_LIST_OF = Cardinality(lower=0, upper=None)


@dataclass(frozen=True)
class Augmentation:
    """A synthetic field and the rule deciding which classes receive it.

    Attributes
    ----------
        description: Human-readable trigger, used in logs.
        matches: Predicate over the schema class (original name and tags).
        field: The field inserted at the front of the class.

    """

    description: str
    matches: Callable[[ClassDecl], bool]
    field: ClassField


def _synthetic_field(name: str, type_name: str, card: Cardinality) -> ClassField:
    return ClassField(name=name, type=type_name, card=card, annotation=SYNTHETIC_FIELD_COMMENT)


# First matching rule wins; name rules come before tag rules
AUGMENTATIONS: tuple[Augmentation, ...] = (
    Augmentation(
        description="class named Party",
        matches=lambda cls: cls.name == "Party",
        field=_synthetic_field("damlParty", PARTY_ALIAS, _ONE_OF),
    ),
    Augmentation(
        description="class named MessageInformation",
        matches=lambda cls: cls.name == "MessageInformation",
        field=_synthetic_field("damlCopyTo", PARTY_ALIAS, _LIST_OF),
    ),
    Augmentation(
        description="class tagged key",
        matches=lambda cls: ClassTag.KEY in cls.tags,
        field=_synthetic_field("rosettaKey", "string", _ONE_OF),
    ),
    Augmentation(
        description="class tagged keyValue",
        matches=lambda cls: ClassTag.KEY_VALUE in cls.tags,
        field=_synthetic_field("rosettaKeyValue", "string", _ONE_OF),
    ),
)


def find_augmentation(cls: ClassDecl) -> Augmentation | None:
    """Return the rule applying to a class, if any."""
    return next((rule for rule in AUGMENTATIONS if rule.matches(cls)), None)


def add_synthetic_fields(cls: ClassDecl) -> ClassDecl:
    """Insert the synthetic field of the first matching rule at the front.

    Args:
    ----
        cls: A class, usually already flattened.

    Returns:
    -------
        The class with the extra field, or the class unchanged.

    """
    rule = find_augmentation(cls)
    if rule is None:
        return cls
    return cls.model_copy(update={"fields": [rule.field, *cls.fields]})
