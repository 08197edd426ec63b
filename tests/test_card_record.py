from typing import Any

import pytest

from conftest import make_payload
from proxifier.models.card import CardConstructionError, CardRecord, CardSet


class TestFromPayload:
    def test_maps_fields(self, wizard_payload: dict[str, Any]) -> None:
        card = CardRecord.from_payload(wizard_payload)

        assert card.id == "id-jace,-vryn's-prodigy"
        assert card.name == "Jace, Vryn's Prodigy"
        assert card.mana_cost == "{1}{U}"
        assert card.type_line == "Legendary Creature — Human Wizard"
        assert card.set == CardSet(name="Magic Origins", code="ori")
        assert card.collector_number == "60"
        assert card.power == "0"
        assert card.toughness == "2"
        assert card.loyalty is None
        assert card.colors == ("U",)

    def test_missing_id_fails(self) -> None:
        payload = make_payload("Lightning Bolt")
        del payload["id"]

        with pytest.raises(CardConstructionError, match="does not have an id"):
            CardRecord.from_payload(payload)

    def test_empty_id_fails(self) -> None:
        with pytest.raises(CardConstructionError):
            CardRecord.from_payload(make_payload("Lightning Bolt", id=""))

    def test_absent_cost_and_text_default_to_empty(self) -> None:
        payload = make_payload("Island", type_line="Basic Land — Island", colors=[])
        del payload["mana_cost"]
        del payload["oracle_text"]

        card = CardRecord.from_payload(payload)

        assert card.mana_cost == ""
        assert card.oracle_text == ""
        assert card.colors == ()

    def test_non_numeric_stats_kept(self) -> None:
        card = CardRecord.from_payload(
            make_payload("Tarmogoyf", type_line="Creature — Lhurgoyf", power="*", toughness="1+*")
        )

        assert card.power == "*"
        assert card.toughness == "1+*"

    def test_two_faced_card_uses_faces(self) -> None:
        payload = make_payload(
            "Delver of Secrets // Insectile Aberration",
            type_line="Creature — Human Wizard // Creature — Human Insect",
            card_faces=[
                {
                    "name": "Delver of Secrets",
                    "mana_cost": "{U}",
                    "oracle_text": "Transform it.",
                    "colors": ["U"],
                    "power": "1",
                    "toughness": "1",
                },
                {
                    "name": "Insectile Aberration",
                    "mana_cost": "",
                    "oracle_text": "Flying",
                    "colors": ["U"],
                    "power": "3",
                    "toughness": "2",
                },
            ],
        )
        for key in ("mana_cost", "oracle_text", "colors"):
            del payload[key]

        card = CardRecord.from_payload(payload)

        assert card.mana_cost == "{U}"
        assert card.oracle_text == "Transform it.\n//\nFlying"
        assert card.colors == ("U",)
        assert card.power == "1"
        assert card.toughness == "1"


class TestDerivedValues:
    def test_types(self, wizard_payload: dict[str, Any]) -> None:
        card = CardRecord.from_payload(wizard_payload)

        assert card.super_types == ["Legendary"]
        assert card.card_types == ["Creature"]
        assert card.sub_types == ["Human", "Wizard"]

    def test_color_label(self, planeswalker_payload: dict[str, Any]) -> None:
        card = CardRecord.from_payload(planeswalker_payload)

        assert card.color_label == "azorius"

    def test_derived_values_are_cached(self, wizard_payload: dict[str, Any]) -> None:
        card = CardRecord.from_payload(wizard_payload)

        assert card.sub_types is card.sub_types

    def test_record_is_immutable(self, bolt_payload: dict[str, Any]) -> None:
        card = CardRecord.from_payload(bolt_payload)

        with pytest.raises(AttributeError):
            card.name = "Shock"  # type: ignore[misc]


class TestToJson:
    def test_instant_has_no_stats(self, bolt_payload: dict[str, Any]) -> None:
        data = CardRecord.from_payload(bolt_payload).to_json()

        assert data == {
            "id": "id-lightning-bolt",
            "name": "Lightning Bolt",
            "manaCost": "{R}",
            "colors": ["R"],
            "type": "Instant",
            "text": "Lightning Bolt deals 3 damage to any target.",
            "set": {"name": "Limited Edition Beta", "code": "leb"},
            "setNumber": "161",
            "superTypes": [],
            "cardTypes": ["Instant"],
            "subTypes": [],
        }

    def test_creature_has_power_and_toughness(self, wizard_payload: dict[str, Any]) -> None:
        data = CardRecord.from_payload(wizard_payload).to_json()

        assert data["power"] == "0"
        assert data["toughness"] == "2"
        assert "loyalty" not in data

    def test_planeswalker_has_loyalty(self, planeswalker_payload: dict[str, Any]) -> None:
        data = CardRecord.from_payload(planeswalker_payload).to_json()

        assert data["loyalty"] == "4"
        assert "power" not in data
        assert "toughness" not in data
