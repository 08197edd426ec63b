"""
HTML card faces.

Builds print-ready markup for resolved cards. Styling comes from the page's
stylesheet and the mana icon font; this module only emits structure and
class names.
"""

from collections.abc import Sequence
from html import escape

from proxifier.models.card import CardRecord
from proxifier.models.deck import DeckSlot, ResolvedDeck
from proxifier.services.mana import convert_mana_symbols

NOT_FOUND_MESSAGE = "Card not found"

ICON_PATH = "svg/{name}.svg"


def _icon(card_type: str, extra_class: str = "") -> str:
    classes = f"image-icon {extra_class}".strip()
    src = ICON_PATH.format(name=card_type.lower())
    return f'<div class="{classes}"><img src="{src}" /></div>'


def image_icons(card_types: Sequence[str]) -> str:
    """One icon for a single card type, two split icons for two, else none."""
    if len(card_types) == 1:
        return _icon(card_types[0])
    if len(card_types) == 2:
        return _icon(card_types[0], "split") + _icon(card_types[1], "split")
    return ""


def text_to_html(text: str) -> str:
    """Escape oracle text, break paragraphs and render mana symbols."""
    escaped = escape(text).replace("\n", "<br /><br />")
    return convert_mana_symbols(escaped)


def _footer(card: CardRecord) -> str:
    if card.is_planeswalker:
        value = escape(card.loyalty or "")
    elif card.is_creature:
        value = f"{escape(card.power or '')} / {escape(card.toughness or '')}"
    else:
        return ""
    return f'<div class="card-footer"><div class="power-block">{value}</div></div>'


def render_card(card: CardRecord) -> str:
    """Render one card face."""
    footer = _footer(card)
    text_classes = "card-text auto-resize has-footer" if footer else "card-text auto-resize"
    card_classes = f"card {card.color_label}".strip()

    return (
        f'<div class="{card_classes}">'
        '<div class="card-content">'
        '<div class="card-header">'
        f'<div class="card-name auto-resize">{escape(card.name)}</div>'
        f'<div class="mana-cost">{convert_mana_symbols(escape(card.mana_cost))}</div>'
        "</div>"
        f'<div class="card-image">{image_icons(card.card_types)}</div>'
        f'<div class="card-type auto-resize">{escape(card.type_line)}</div>'
        f'<div class="{text_classes}">{text_to_html(card.oracle_text)}</div>'
        f"{footer}"
        "</div>"
        "</div>"
    )


def render_not_found(name: str) -> str:
    """Render the placeholder for a card that could not be resolved."""
    return (
        '<div class="card error">'
        '<div class="card-content">'
        '<div class="card-header">'
        f'<div class="card-name auto-resize">{escape(name)}</div>'
        "</div>"
        f'<div class="card-text">{NOT_FOUND_MESSAGE}</div>'
        "</div>"
        "</div>"
    )


def render_slot(slot: DeckSlot) -> str:
    if slot.card is None:
        return render_not_found(slot.request.name)
    return render_card(slot.card)


def render_deck(deck: ResolvedDeck) -> str:
    """Render every slot of a resolved deck, in order."""
    return "\n".join(render_slot(slot) for slot in deck.slots)
