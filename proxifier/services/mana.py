"""
Mana symbol markup.

Rewrites bracketed mana tokens in card text into icon markup:

    {R}     -> plain symbol
    {W/P}   -> Phyrexian symbol for W
    {P/W}   -> Phyrexian symbol for W
    {2/U}   -> split symbol wrapping 2 and U

Token grammar: "{" SYMBOL ( "/" SYMBOL )? "}" where a symbol is one or more
ASCII letters or digits. Braced text that does not fit the grammar is left
untouched.
"""

import string
from dataclasses import dataclass
from enum import Enum

SYMBOL_CHARS = frozenset(string.ascii_letters + string.digits)

PHYREXIAN = "P"

# Symbols whose icon name differs from their lowercased code
RENAMED_SYMBOLS = {"q": "untap"}


class ManaTokenKind(str, Enum):
    """How a token is rendered."""

    SINGLE = "single"
    PHYREXIAN = "phyrexian"
    SPLIT = "split"


@dataclass(frozen=True, slots=True)
class ManaToken:
    """
    A parsed mana token.

    Attributes:
        kind: Rendering rule that applies
        symbols: One symbol for single/phyrexian tokens, two for split
        raw: Token text as it appeared, braces included
    """

    kind: ManaTokenKind
    symbols: tuple[str, ...]
    raw: str


def _is_symbol(text: str) -> bool:
    return bool(text) and all(ch in SYMBOL_CHARS for ch in text)


def parse_token(body: str) -> ManaToken | None:
    """
    Parse the text between a pair of braces.

    Args:
        body: Token contents without braces, e.g. "W/P"

    Returns:
        ManaToken, or None if the body is not a valid token
    """
    raw = "{" + body + "}"
    parts = body.split("/")

    if len(parts) == 1:
        if not _is_symbol(parts[0]):
            return None
        return ManaToken(ManaTokenKind.SINGLE, (parts[0],), raw)

    if len(parts) != 2 or not (_is_symbol(parts[0]) and _is_symbol(parts[1])):
        return None

    first, second = parts
    if second == PHYREXIAN:
        return ManaToken(ManaTokenKind.PHYREXIAN, (first,), raw)
    if first == PHYREXIAN:
        return ManaToken(ManaTokenKind.PHYREXIAN, (second,), raw)
    return ManaToken(ManaTokenKind.SPLIT, (first, second), raw)


def tokenize_mana(text: str) -> list[str | ManaToken]:
    """
    Split text into literal fragments and mana tokens.

    Adjacent literal text is merged into a single fragment.

    Args:
        text: Any text, e.g. a mana cost or oracle text

    Returns:
        List of literal strings and ManaToken objects in source order
    """
    pieces: list[str | ManaToken] = []
    literal: list[str] = []
    pos = 0

    while pos < len(text):
        start = text.find("{", pos)
        if start == -1:
            literal.append(text[pos:])
            break

        literal.append(text[pos:start])
        end = text.find("}", start + 1)
        if end == -1:
            literal.append(text[start:])
            break

        # A nested "{" means the first brace is literal
        nested = text.find("{", start + 1, end)
        if nested != -1:
            literal.append(text[start:nested])
            pos = nested
            continue

        token = parse_token(text[start + 1 : end])
        if token is None:
            literal.append(text[start : end + 1])
        else:
            if literal:
                joined = "".join(literal)
                if joined:
                    pieces.append(joined)
                literal = []
            pieces.append(token)
        pos = end + 1

    joined = "".join(literal)
    if joined:
        pieces.append(joined)

    return pieces


def render_symbol(symbol: str, split: bool = False, phyrexian: bool = False) -> str:
    """
    Render one mana symbol as an icon tag.

    Args:
        symbol: Symbol code, e.g. "W", "2", "Q"
        split: True when the symbol is half of a split token
        phyrexian: True for Phyrexian mana

    Returns:
        An <i> tag with the icon classes
    """
    name = symbol.lower()
    name = RENAMED_SYMBOLS.get(name, name)

    if phyrexian:
        classes = f"mi-p mi-mana-{name}"
    elif split:
        classes = f"mi-{name}"
    else:
        classes = f"mi-{name} mi-mana"

    return f'<i class="mi {classes}"></i>'


def render_token(token: ManaToken) -> str:
    """Render a parsed token as markup."""
    if token.kind is ManaTokenKind.SINGLE:
        return render_symbol(token.symbols[0])

    if token.kind is ManaTokenKind.PHYREXIAN:
        return render_symbol(token.symbols[0], split=True, phyrexian=True)

    first, second = token.symbols
    return (
        '<div class="mi-split">'
        + render_symbol(first, split=True)
        + render_symbol(second, split=True)
        + "</div>"
    )


def convert_mana_symbols(text: str) -> str:
    """
    Replace every mana token in text with its markup.

    Args:
        text: Text containing tokens like "{2}{W/P}"

    Returns:
        Text with tokens rendered and everything else unchanged
    """
    return "".join(
        piece if isinstance(piece, str) else render_token(piece)
        for piece in tokenize_mana(text)
    )
