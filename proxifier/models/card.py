"""
Card record model.

A CardRecord is an immutable view of one Scryfall card payload. Derived
values (type tiers, color label) are computed from the stored type line and
colors on first access and cached on the instance.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property
from typing import Any

from proxifier.services.colors import classify_colors
from proxifier.services.taxonomy import card_types, sub_types, super_types

FACE_MANA_SEPARATOR = " // "
FACE_TEXT_SEPARATOR = "\n//\n"


class CardConstructionError(Exception):
    """Raised when a payload cannot be turned into a CardRecord."""

    def __init__(self, message: str, payload: Mapping[str, Any] | None = None) -> None:
        self.payload = payload
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class CardSet:
    """A card's set: full name and set code."""

    name: str
    code: str


@dataclass(frozen=True)
class CardRecord:
    """
    Normalized card data from Scryfall.

    Attributes:
        id: Scryfall card ID (unique per printing)
        name: Card name; multi-face cards use "Front // Back"
        type_line: Full type line, e.g. "Legendary Creature — Human Wizard"
        set: Set name and code
        collector_number: Collector number, may contain letters or ★
        mana_cost: Mana cost like "{1}{R}", "" if absent
        oracle_text: Rules text, "" if absent
        power: Power if any, may be non-numeric such as "*"
        toughness: Toughness if any, may be non-numeric
        loyalty: Loyalty if any, may be non-numeric such as "X"
        colors: Color codes (W, U, B, R, G) in Scryfall order
    """

    id: str
    name: str
    type_line: str
    set: CardSet
    collector_number: str
    mana_cost: str = ""
    oracle_text: str = ""
    power: str | None = None
    toughness: str | None = None
    loyalty: str | None = None
    colors: tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CardRecord":
        """
        Build a record from a raw Scryfall card object.

        Two-faced cards without top-level mana cost, text or colors get them
        from their faces.

        Raises:
            CardConstructionError: If the payload has no id
        """
        card_id = payload.get("id")
        if not card_id:
            raise CardConstructionError(
                "Could not create card: payload does not have an id", payload
            )

        faces: list[Mapping[str, Any]] = payload.get("card_faces") or []

        mana_cost = payload.get("mana_cost")
        if mana_cost is None:
            mana_cost = FACE_MANA_SEPARATOR.join(
                face["mana_cost"] for face in faces if face.get("mana_cost")
            )

        oracle_text = payload.get("oracle_text")
        if oracle_text is None:
            oracle_text = FACE_TEXT_SEPARATOR.join(
                face["oracle_text"] for face in faces if face.get("oracle_text")
            )

        colors = payload.get("colors")
        if colors is None:
            colors = []
            for face in faces:
                colors.extend(c for c in face.get("colors", []) if c not in colors)

        front: Mapping[str, Any] = faces[0] if faces else {}

        return cls(
            id=str(card_id),
            name=payload.get("name", ""),
            type_line=payload.get("type_line", ""),
            set=CardSet(name=payload.get("set_name", ""), code=payload.get("set", "")),
            collector_number=str(payload.get("collector_number", "")),
            mana_cost=mana_cost,
            oracle_text=oracle_text,
            power=payload.get("power", front.get("power")),
            toughness=payload.get("toughness", front.get("toughness")),
            loyalty=payload.get("loyalty", front.get("loyalty")),
            colors=tuple(colors),
        )

    @cached_property
    def super_types(self) -> list[str]:
        return super_types(self.type_line)

    @cached_property
    def card_types(self) -> list[str]:
        return card_types(self.type_line)

    @cached_property
    def sub_types(self) -> list[str]:
        return sub_types(self.type_line)

    @cached_property
    def color_label(self) -> str:
        """Color theme: colorless, single color, guild or multicolored."""
        return classify_colors(self.colors)

    @property
    def is_creature(self) -> bool:
        return "Creature" in self.type_line

    @property
    def is_planeswalker(self) -> bool:
        return "Planeswalker" in self.type_line

    def to_json(self) -> dict[str, Any]:
        """
        Serialize to the JSON shape served to the renderer.

        Power and toughness are only included for creatures, loyalty only
        for planeswalkers.
        """
        fields: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "manaCost": self.mana_cost,
            "colors": list(self.colors),
            "type": self.type_line,
            "text": self.oracle_text,
            "set": {"name": self.set.name, "code": self.set.code},
            "setNumber": self.collector_number,
            "superTypes": list(self.super_types),
            "cardTypes": list(self.card_types),
            "subTypes": list(self.sub_types),
        }

        if self.is_creature:
            fields["power"] = self.power
            fields["toughness"] = self.toughness

        if self.is_planeswalker:
            fields["loyalty"] = self.loyalty

        return fields
