"""
Color classification.

Maps a card's colors (Scryfall single-letter codes W, U, B, R, G) to the
label used to theme a rendered card: colorless, a single color, a guild
name for two colors, or multicolored.
"""

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)

COLORLESS = "colorless"
MULTICOLORED = "multicolored"

GUILDS: dict[frozenset[str], str] = {
    frozenset({"B", "U"}): "dimir",
    frozenset({"B", "G"}): "golgari",
    frozenset({"B", "R"}): "rakdos",
    frozenset({"B", "W"}): "orzhov",
    frozenset({"U", "G"}): "simic",
    frozenset({"U", "R"}): "izzet",
    frozenset({"U", "W"}): "azorius",
    frozenset({"G", "R"}): "gruul",
    frozenset({"G", "W"}): "selesnya",
    frozenset({"R", "W"}): "boros",
}


def guild_name(colors: Sequence[str]) -> str:
    """
    Look up the guild for a pair of color codes.

    Returns:
        Guild name, or "" if the pair is not a known guild.
    """
    name = GUILDS.get(frozenset(colors), "")
    if not name:
        logger.warning("No guild for color pair %s", list(colors))
    return name


def classify_colors(colors: Sequence[str]) -> str:
    """
    Derive the color label for a card.

    Args:
        colors: Ordered color codes, e.g. ["B", "U"]

    Returns:
        "colorless", the lowercased code for one color, a guild name
        for two colors, or "multicolored" for three or more.
    """
    if not colors:
        return COLORLESS

    if len(colors) == 1:
        return colors[0].lower()

    if len(colors) == 2:
        return guild_name(colors)

    return MULTICOLORED
