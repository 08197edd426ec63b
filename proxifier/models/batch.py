from dataclasses import dataclass, field

from proxifier.models.card import CardRecord


@dataclass(frozen=True)
class BatchResult:
    """
    Outcome of resolving a batch of card names.

    Attributes:
        found: Requested name -> resolved card. Keys are the names as
            requested, which may differ from the card's canonical name.
        not_found: Requested names with no match, in request order
    """

    found: dict[str, CardRecord] = field(default_factory=dict)
    not_found: tuple[str, ...] = ()

    def get(self, name: str) -> CardRecord | None:
        """Card resolved for a requested name, or None."""
        return self.found.get(name)
