"""
Type line taxonomy.

Scryfall returns a combined `type_line` string like:
    "Legendary Creature — Human Wizard"
    "Basic Snow Land — Forest"
    "Instant"

This module splits it into super-types, card types and sub-types.
Only two closed sets are recognized; words outside them are ignored
unless they follow the em-dash.
"""

from dataclasses import dataclass, field

SUPER_TYPES = frozenset({"Basic", "Legendary", "Snow", "World"})

CARD_TYPES = frozenset(
    {"Artifact", "Creature", "Enchantment", "Instant", "Land", "Planeswalker", "Sorcery"}
)

# Scryfall separates types from sub-types with an em-dash
SUBTYPE_SEPARATOR = "—"


@dataclass(frozen=True)
class TypeLineResult:
    """Components of a type line, each in original order."""

    super_types: list[str] = field(default_factory=list)
    card_types: list[str] = field(default_factory=list)
    sub_types: list[str] = field(default_factory=list)


def super_types(type_line: str) -> list[str]:
    """Words of the type line that are super-types, in order."""
    return [word for word in type_line.split() if word in SUPER_TYPES]


def card_types(type_line: str) -> list[str]:
    """Words of the type line that are card types, in order."""
    return [word for word in type_line.split() if word in CARD_TYPES]


def sub_types(type_line: str) -> list[str]:
    """
    Words after the em-dash separator.

    Returns an empty list when the type line has no separator.
    """
    parts = type_line.split(SUBTYPE_SEPARATOR)
    if len(parts) < 2:
        return []
    return parts[1].split()


def extract_types(type_line: str) -> TypeLineResult:
    """
    Split a type line into super-types, card types and sub-types.

    Args:
        type_line: Full type line, e.g. "Legendary Creature — Human Wizard"

    Returns:
        TypeLineResult with the three tiers
    """
    return TypeLineResult(
        super_types=super_types(type_line),
        card_types=card_types(type_line),
        sub_types=sub_types(type_line),
    )
