"""Tests for synthetic field injection."""

from cdm_metagen.models.schema import Cardinality, ClassDecl, ClassField
from cdm_metagen.transform.augment import (
    AUGMENTATIONS,
    SYNTHETIC_FIELD_COMMENT,
    add_synthetic_fields,
    find_augmentation,
)


def _class(name: str, *tags: str) -> ClassDecl:
    return ClassDecl(
        name=name,
        tags=frozenset(tags),
        fields=[ClassField(name="own", type="string")],
    )


class TestAddSyntheticFields:
    """Tests for add_synthetic_fields."""

    def test_party(self) -> None:
        """Party gains a DAML party field at the front."""
        result = add_synthetic_fields(_class("Party"))

        first = result.fields[0]
        assert first.name == "damlParty"
        assert first.type == "DamlParty"
        assert first.card == Cardinality(lower=1, upper=1)
        assert [f.name for f in result.fields] == ["damlParty", "own"]

    def test_message_information(self) -> None:
        """MessageInformation gains a list of copy-to parties."""
        first = add_synthetic_fields(_class("MessageInformation")).fields[0]

        assert first.name == "damlCopyTo"
        assert first.card == Cardinality(lower=0, upper=None)

    def test_key_tag(self) -> None:
        """Key classes gain a text key."""
        first = add_synthetic_fields(_class("Trade", "key")).fields[0]

        assert first.name == "rosettaKey"
        assert first.type == "string"

    def test_key_value_tag(self) -> None:
        """KeyValue classes gain a text key value."""
        first = add_synthetic_fields(_class("Price", "keyValue")).fields[0]
        assert first.name == "rosettaKeyValue"

    def test_first_rule_wins(self) -> None:
        """A name rule takes precedence over a tag rule."""
        result = add_synthetic_fields(_class("Party", "key"))
        assert [f.name for f in result.fields] == ["damlParty", "own"]

    def test_no_match_unchanged(self) -> None:
        """Other classes are returned as is."""
        cls = _class("Trade", "metadata")
        assert add_synthetic_fields(cls) is cls

    def test_synthetic_comment(self) -> None:
        """Every synthetic field is documented as generated."""
        for rule in AUGMENTATIONS:
            assert rule.field.annotation == SYNTHETIC_FIELD_COMMENT


class TestFindAugmentation:
    """Tests for find_augmentation."""

    def test_matches_on_original_name(self) -> None:
        """Rules match the schema name, not the renamed one."""
        assert find_augmentation(_class("PartyData")) is None
        rule = find_augmentation(_class("Party"))
        assert rule is not None
        assert rule.description == "class named Party"
