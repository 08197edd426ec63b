"""
Decklist resolution pipeline.

raw text -> parsed requests -> distinct names -> one batch lookup
-> one slot per physical card, in decklist order.
"""

import logging
from collections.abc import Sequence

from proxifier.models.batch import BatchResult
from proxifier.models.deck import DeckSlot, ResolvedDeck
from proxifier.models.decklist import DecklistLineRequest
from proxifier.parsers.decklist import parse_decklist
from proxifier.services.batch_resolver import BatchResolver
from proxifier.services.scryfall import CardLookup

logger = logging.getLogger(__name__)


def expand_slots(
    requests: Sequence[DecklistLineRequest], result: BatchResult
) -> list[DeckSlot]:
    """
    Repeat each request's card `quantity` times.

    Requests whose name was not found produce slots with no card, so the
    renderer can show a placeholder in that position.
    """
    return [
        DeckSlot(request=request, copy=copy, card=result.get(request.name))
        for request in requests
        for copy in range(request.quantity)
    ]


async def resolve_decklist(
    text: str, lookup: CardLookup, strict: bool = False
) -> ResolvedDeck:
    """
    Resolve a decklist into printable slots.

    Args:
        text: Raw decklist text
        lookup: Card database collaborator
        strict: Abort on the first unparseable line

    Returns:
        ResolvedDeck with slots, unmatched names and skipped lines

    Raises:
        DecklistParseError: In strict mode, if a line fails to parse
        CardLookupError: If the batch lookup fails
    """
    parsed = parse_decklist(text, strict=strict)
    result = await BatchResolver(lookup).resolve(parsed.names())
    slots = expand_slots(parsed.requests, result)

    logger.info(
        "Decklist resolved: %d slots, %d not found, %d lines skipped",
        len(slots),
        len(result.not_found),
        len(parsed.failures),
    )

    return ResolvedDeck(
        slots=slots,
        not_found=list(result.not_found),
        failures=parsed.failures,
    )
