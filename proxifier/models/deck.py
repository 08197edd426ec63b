from dataclasses import dataclass, field

from proxifier.models.card import CardRecord
from proxifier.models.decklist import DecklistLineRequest, LineFailure


@dataclass(frozen=True, slots=True)
class DeckSlot:
    """
    One physical card in an expanded deck.

    Attributes:
        request: Decklist line this slot came from
        copy: Zero-based copy index within the line's quantity
        card: Resolved card, or None if the name was not found
    """

    request: DecklistLineRequest
    copy: int
    card: CardRecord | None = None

    @property
    def found(self) -> bool:
        return self.card is not None


@dataclass
class ResolvedDeck:
    """A decklist resolved and expanded into printable slots."""

    slots: list[DeckSlot] = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)
    failures: list[LineFailure] = field(default_factory=list)

    def found_count(self) -> int:
        """Slots with a resolved card."""
        return sum(1 for slot in self.slots if slot.found)

    def missing_count(self) -> int:
        """Slots that will render as not found."""
        return len(self.slots) - self.found_count()
