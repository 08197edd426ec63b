from proxifier.models.batch import BatchResult
from proxifier.models.card import CardConstructionError, CardRecord, CardSet
from proxifier.models.deck import DeckSlot, ResolvedDeck
from proxifier.models.decklist import DecklistLineRequest, LineFailure, ParsedDecklist

__all__ = [
    "BatchResult",
    "CardConstructionError",
    "CardRecord",
    "CardSet",
    "DeckSlot",
    "DecklistLineRequest",
    "LineFailure",
    "ParsedDecklist",
    "ResolvedDeck",
]
