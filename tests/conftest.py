from collections.abc import Sequence
from typing import Any

import pytest

from proxifier.services.scryfall import CollectionResponse


def make_payload(name: str, **overrides: Any) -> dict[str, Any]:
    """Minimal Scryfall card object."""
    payload: dict[str, Any] = {
        "object": "card",
        "id": f"id-{name.lower().replace(' ', '-')}",
        "name": name,
        "mana_cost": "{R}",
        "type_line": "Instant",
        "oracle_text": f"{name} deals 3 damage to any target.",
        "colors": ["R"],
        "set": "leb",
        "set_name": "Limited Edition Beta",
        "collector_number": "161",
    }
    payload.update(overrides)
    return payload


class FakeLookup:
    """In-memory card database answering like Scryfall's collection endpoint."""

    def __init__(self, cards: dict[str, dict[str, Any]]) -> None:
        self.cards = cards
        self.collection_calls: list[list[str]] = []
        self.named_calls: list[tuple[str, str | None, bool]] = []

    async def fetch_collection(self, names: Sequence[str]) -> CollectionResponse:
        self.collection_calls.append(list(names))
        return CollectionResponse(
            data=[self.cards[name] for name in names if name in self.cards],
            not_found=[name for name in names if name not in self.cards],
        )

    async def lookup_named(
        self, name: str, set_code: str | None = None, exact: bool = False
    ) -> dict[str, Any] | None:
        self.named_calls.append((name, set_code, exact))
        return self.cards.get(name)


@pytest.fixture
def bolt_payload() -> dict[str, Any]:
    return make_payload("Lightning Bolt", collector_number="161")


@pytest.fixture
def counterspell_payload() -> dict[str, Any]:
    return make_payload(
        "Counterspell",
        mana_cost="{U}{U}",
        oracle_text="Counter target spell.",
        colors=["U"],
        collector_number="54",
    )


@pytest.fixture
def wizard_payload() -> dict[str, Any]:
    return make_payload(
        "Jace, Vryn's Prodigy",
        mana_cost="{1}{U}",
        type_line="Legendary Creature — Human Wizard",
        oracle_text="{T}: Draw a card, then discard a card.",
        colors=["U"],
        power="0",
        toughness="2",
        set="ori",
        set_name="Magic Origins",
        collector_number="60",
    )


@pytest.fixture
def planeswalker_payload() -> dict[str, Any]:
    return make_payload(
        "Teferi, Hero of Dominaria",
        mana_cost="{3}{W}{U}",
        type_line="Legendary Planeswalker — Teferi",
        oracle_text="+1: Draw a card.\n−8: You get an emblem.",
        colors=["W", "U"],
        loyalty="4",
        set="dom",
        set_name="Dominaria",
        collector_number="207",
    )


@pytest.fixture
def fake_lookup(
    bolt_payload: dict[str, Any],
    counterspell_payload: dict[str, Any],
    wizard_payload: dict[str, Any],
) -> FakeLookup:
    return FakeLookup(
        {
            "Lightning Bolt": bolt_payload,
            "Counterspell": counterspell_payload,
            "Jace, Vryn's Prodigy": wizard_payload,
        }
    )
