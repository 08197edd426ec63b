from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class DecklistLineRequest:
    """
    One parsed decklist line.

    Attributes:
        name: Card name fragment to look up (never empty)
        quantity: Number of copies requested (at least 1)
        set_code: Set code from a "[SET]" or "[SET#NUM]" prefix
        collector_number: Collector number from a "[SET#NUM]" prefix
    """

    name: str
    quantity: int = 1
    set_code: str | None = None
    collector_number: str | None = None


@dataclass(frozen=True, slots=True)
class LineFailure:
    """A decklist line that could not be parsed."""

    line_number: int
    line: str
    reason: str


@dataclass
class ParsedDecklist:
    """Requests from every valid line, plus the lines that failed."""

    requests: list[DecklistLineRequest] = field(default_factory=list)
    failures: list[LineFailure] = field(default_factory=list)

    def names(self) -> list[str]:
        """Requested names in decklist order, duplicates included."""
        return [request.name for request in self.requests]

    def total_cards(self) -> int:
        """Total copies across all requests."""
        return sum(request.quantity for request in self.requests)
