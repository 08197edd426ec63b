"""
Card API endpoints.

Single-card and multi-card lookups against Scryfall, served in the JSON
shape the card renderer consumes.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from proxifier.models.card import CardConstructionError, CardRecord
from proxifier.services.batch_resolver import BatchResolver
from proxifier.services.scryfall import (
    CardLookup,
    CardLookupError,
    TooManyIdentifiersError,
    get_card_lookup,
)

router = APIRouter(prefix="/cards", tags=["cards"])


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CardSetResponse(CamelModel):
    name: str
    code: str


class CardResponse(CamelModel):
    """A card as JSON. Power/toughness and loyalty appear only when relevant."""

    id: str
    name: str
    mana_cost: str
    colors: list[str]
    type: str
    text: str
    set: CardSetResponse
    set_number: str
    super_types: list[str]
    card_types: list[str]
    sub_types: list[str]
    power: str | None = None
    toughness: str | None = None
    loyalty: str | None = None


class CardNamesRequest(BaseModel):
    """Request model for a multi-card lookup."""

    names: list[str] = Field(
        default_factory=list,
        description="Card names; duplicates are looked up once",
        examples=[["Lightning Bolt", "Counterspell"]],
    )


class CardCollectionResponse(CamelModel):
    """Cards found per requested name, plus names with no match."""

    found: dict[str, CardResponse] = Field(default_factory=dict)
    not_found: list[str] = Field(default_factory=list)


def card_response(card: CardRecord) -> CardResponse:
    """Convert a card record to its response model."""
    return CardResponse.model_validate(card.to_json())


def lookup_failure(error: CardLookupError) -> HTTPException:
    """Map a failed lookup to a single user-facing error."""
    if isinstance(error, TooManyIdentifiersError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(error),
        )
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=f"Card database unavailable: {error}",
    )


@router.get(
    "/named",
    response_model=CardResponse,
    response_model_exclude_unset=True,
    responses={204: {"description": "No card with that name"}},
)
async def get_card_by_name(
    name: Annotated[str, Query(min_length=1)],
    lookup: Annotated[CardLookup, Depends(get_card_lookup)],
) -> CardResponse | Response:
    """
    Look up one card by exact name.

    Returns an empty 204 response if no card has that name.
    """
    try:
        payload = await lookup.lookup_named(name, exact=True)
    except CardLookupError as e:
        raise lookup_failure(e) from e

    if payload is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    try:
        card = CardRecord.from_payload(payload)
    except CardConstructionError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    return card_response(card)


@router.post(
    "/collection",
    response_model=CardCollectionResponse,
    response_model_exclude_unset=True,
)
async def get_cards_by_names(
    request: CardNamesRequest,
    lookup: Annotated[CardLookup, Depends(get_card_lookup)],
) -> CardCollectionResponse:
    """
    Look up many cards in one batch.

    Every distinct requested name lands in exactly one of `found` or
    `notFound`.
    """
    try:
        result = await BatchResolver(lookup).resolve(request.names)
    except CardLookupError as e:
        raise lookup_failure(e) from e

    return CardCollectionResponse(
        found={name: card_response(card) for name, card in result.found.items()},
        not_found=list(result.not_found),
    )
