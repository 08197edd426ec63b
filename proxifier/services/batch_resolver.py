"""
Batch card resolution.

Resolves many card names with a single collection lookup. The lookup
answers with matched cards in request order but OMITS unmatched names from
`data`, so response index i does not line up with request index i once any
name is missing. Reconciliation walks the request in order and counts the
misses seen so far:

    names     = ["Bolt", "Shock", "Opt"]
    not_found = ["Shock"]
    data      = [<Bolt>, <Opt>]

    Bolt  -> data[0 - 0]
    Shock -> not found, offset = 1
    Opt   -> data[2 - 1]
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from functools import reduce
from typing import Any

from proxifier.models.batch import BatchResult
from proxifier.models.card import CardConstructionError, CardRecord
from proxifier.services.scryfall import CardLookup, MalformedResponseError

logger = logging.getLogger(__name__)


def dedupe_names(names: Iterable[str]) -> list[str]:
    """
    Remove duplicate names, keeping first-occurrence order.

    Names are compared exactly; "Bolt" and "bolt" are distinct.
    """
    return list(dict.fromkeys(names))


@dataclass(frozen=True)
class _Fold:
    """Accumulator carried through reconciliation."""

    offset: int = 0
    found: dict[str, CardRecord] = field(default_factory=dict)
    not_found: tuple[str, ...] = ()


def reconcile(
    names: Sequence[str],
    not_found: Iterable[str],
    data: Sequence[Mapping[str, Any]],
) -> BatchResult:
    """
    Map a collection response back onto the requested names.

    Args:
        names: Deduplicated names exactly as requested
        not_found: Names the lookup could not match
        data: Matched card payloads, request order, unmatched omitted

    Returns:
        BatchResult keyed by requested name

    Raises:
        MalformedResponseError: If `data` does not have exactly one payload
            per matched name, or a payload cannot become a CardRecord
    """
    missing = frozenset(not_found)

    def step(acc: _Fold, indexed: tuple[int, str]) -> _Fold:
        index, name = indexed

        if name in missing:
            return _Fold(acc.offset + 1, acc.found, (*acc.not_found, name))

        position = index - acc.offset
        if position >= len(data):
            raise MalformedResponseError(
                f"Collection response has no card for {name!r} (expected at {position})"
            )

        try:
            card = CardRecord.from_payload(data[position])
        except CardConstructionError as e:
            raise MalformedResponseError(f"Invalid card for {name!r}: {e}") from e

        return _Fold(acc.offset, {**acc.found, name: card}, acc.not_found)

    result = reduce(step, enumerate(names), _Fold())

    consumed = len(names) - result.offset
    if consumed != len(data):
        raise MalformedResponseError(
            f"Collection response has {len(data)} cards for {consumed} matched names"
        )

    return BatchResult(found=result.found, not_found=result.not_found)


class BatchResolver:
    """
    Resolves card names through one collection lookup.

    Failures of the lookup itself propagate unchanged; a failed batch
    yields no partial result.
    """

    def __init__(self, lookup: CardLookup) -> None:
        self._lookup = lookup

    async def resolve(self, names: Iterable[str]) -> BatchResult:
        """
        Resolve names to cards.

        Args:
            names: Requested names, duplicates allowed

        Returns:
            BatchResult for every distinct name

        Raises:
            CardLookupError: If the lookup fails or answers malformed data
        """
        unique = dedupe_names(names)
        if not unique:
            return BatchResult()

        response = await self._lookup.fetch_collection(unique)
        result = reconcile(unique, response.not_found, response.data)

        logger.info(
            "Resolved %d of %d names (%d not found)",
            len(result.found),
            len(unique),
            len(result.not_found),
        )
        return result
