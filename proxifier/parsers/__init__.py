from proxifier.parsers.decklist import (
    DecklistParseError,
    EmptyLineError,
    LineParseError,
    parse_decklist,
    parse_line,
)

__all__ = [
    "DecklistParseError",
    "EmptyLineError",
    "LineParseError",
    "parse_decklist",
    "parse_line",
]
