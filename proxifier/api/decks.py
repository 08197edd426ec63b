"""
Decklist API endpoints.

Resolves a pasted decklist into one entry per physical card, as JSON for
the client-side renderer or as ready-to-print HTML.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from proxifier.api.cards import CamelModel, CardResponse, card_response, lookup_failure
from proxifier.models.deck import DeckSlot, ResolvedDeck
from proxifier.parsers.decklist import DecklistParseError
from proxifier.services.deck import resolve_decklist
from proxifier.services.renderer import render_deck
from proxifier.services.scryfall import CardLookup, CardLookupError, get_card_lookup

router = APIRouter(prefix="/decks", tags=["decks"])


class DecklistRequest(BaseModel):
    """Request model for decklist resolution."""

    decklist: str = Field(
        ...,
        description="One card per line: '[qty] [[SET#NUM]] name // comment'",
        examples=["4 Lightning Bolt\n1 [MIR#71] Kukemssa Pirates"],
    )
    strict: bool = Field(
        default=False,
        description="Reject the whole decklist if any line cannot be parsed",
    )


class SlotResponse(CamelModel):
    """One physical card position; `card` is null when not found."""

    name: str
    quantity: int
    set_code: str | None = None
    collector_number: str | None = None
    copy_index: int
    card: CardResponse | None = None


class LineFailureResponse(CamelModel):
    line_number: int
    line: str
    reason: str


class DeckResolveResponse(CamelModel):
    """Resolved decklist."""

    cards: list[SlotResponse] = Field(default_factory=list)
    not_found: list[str] = Field(default_factory=list)
    failures: list[LineFailureResponse] = Field(default_factory=list)


def slot_response(slot: DeckSlot) -> SlotResponse:
    return SlotResponse(
        name=slot.request.name,
        quantity=slot.request.quantity,
        set_code=slot.request.set_code,
        collector_number=slot.request.collector_number,
        copy_index=slot.copy,
        card=card_response(slot.card) if slot.card is not None else None,
    )


async def _resolve(request: DecklistRequest, lookup: CardLookup) -> ResolvedDeck:
    try:
        return await resolve_decklist(request.decklist, lookup, strict=request.strict)
    except DecklistParseError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Line {e.line_number} could not be parsed: {e.reason}",
        ) from e
    except CardLookupError as e:
        raise lookup_failure(e) from e


@router.post(
    "/resolve",
    response_model=DeckResolveResponse,
    response_model_exclude_unset=True,
)
async def resolve_deck(
    request: DecklistRequest,
    lookup: Annotated[CardLookup, Depends(get_card_lookup)],
) -> DeckResolveResponse:
    """
    Resolve a decklist into cards.

    Each line is repeated by its quantity. Unmatched names keep their slot
    with a null card; unparseable lines are reported in `failures`.
    """
    deck = await _resolve(request, lookup)

    return DeckResolveResponse(
        cards=[slot_response(slot) for slot in deck.slots],
        not_found=deck.not_found,
        failures=[
            LineFailureResponse(
                line_number=failure.line_number,
                line=failure.line,
                reason=failure.reason,
            )
            for failure in deck.failures
        ],
    )


@router.post("/render", response_class=HTMLResponse)
async def render_deck_html(
    request: DecklistRequest,
    lookup: Annotated[CardLookup, Depends(get_card_lookup)],
) -> HTMLResponse:
    """Resolve a decklist and render every card face as HTML."""
    deck = await _resolve(request, lookup)
    return HTMLResponse(content=render_deck(deck))
