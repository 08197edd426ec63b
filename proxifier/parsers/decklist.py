"""
Decklist parser.

Decklist line format:
    [<quantity> ][[<set>]|[<set>#<number>] ]<card name>[ // comment]

Example:
    3 Lightning Bolt
    1 [MIR#71] Kukemssa Pirates
    [LEB] Shivan Dragon  // the good one

Quantity defaults to 1 when absent or below 1. Set codes and collector
numbers are ASCII letters and digits, in any case.
"""

import logging
import string
import unicodedata

from proxifier.config import MAX_LINE_QUANTITY
from proxifier.models.decklist import DecklistLineRequest, LineFailure, ParsedDecklist

logger = logging.getLogger(__name__)

COMMENT_MARKER = "//"

BRACKET_OPEN = "["
BRACKET_CLOSE = "]"
NUMBER_SEPARATOR = "#"

CODE_CHARS = frozenset(string.ascii_letters + string.digits)
DIGITS = frozenset(string.digits)


class LineParseError(Exception):
    """Raised when a decklist line does not fit the line grammar."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"Could not parse line {line!r}: {reason}")


class EmptyLineError(LineParseError):
    """Raised when a line has no card name once comments are stripped."""


class DecklistParseError(Exception):
    """Raised by strict decklist parsing when any line fails."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Parse error at line {line_number}: {reason}")


def _is_code(text: str) -> bool:
    return bool(text) and all(ch in CODE_CHARS for ch in text)


def _has_control_chars(text: str) -> bool:
    return any(unicodedata.category(ch) == "Cc" and not ch.isspace() for ch in text)


def _take_quantity(text: str) -> tuple[str | None, str]:
    """
    Consume a leading run of digits followed by whitespace.

    Returns:
        (digits or None if absent, remaining text)
    """
    end = 0
    while end < len(text) and text[end] in DIGITS:
        end += 1

    if end == 0 or end == len(text) or not text[end].isspace():
        return None, text

    return text[:end], text[end:].lstrip()


def _to_quantity(line: str, digits: str | None) -> int:
    """
    Convert a quantity token, defaulting to 1 when absent or below 1.

    Raises:
        LineParseError: If the quantity is above MAX_LINE_QUANTITY
    """
    if digits is None:
        return 1

    significant = digits.lstrip("0") or "0"
    too_long = len(significant) > len(str(MAX_LINE_QUANTITY))
    if too_long or int(significant) > MAX_LINE_QUANTITY:
        raise LineParseError(line, f"quantity is above {MAX_LINE_QUANTITY}")

    return max(int(significant), 1)


def _take_set(text: str) -> tuple[str | None, str | None, str]:
    """
    Consume a leading "[SET]" or "[SET#NUMBER]" token.

    The token must be followed by whitespace or end the line. Anything that
    does not fit is left in place as part of the name.

    Returns:
        (set code, collector number, remaining text)
    """
    if not text.startswith(BRACKET_OPEN):
        return None, None, text

    close = text.find(BRACKET_CLOSE)
    if close == -1:
        return None, None, text

    rest = text[close + 1 :]
    if rest and not rest[0].isspace():
        return None, None, text

    body = text[1:close]
    set_code, separator, number = body.partition(NUMBER_SEPARATOR)

    if not _is_code(set_code):
        return None, None, text
    if separator and not _is_code(number):
        return None, None, text

    return set_code, (number if separator else None), rest.strip()


def parse_line(line: str) -> DecklistLineRequest:
    """
    Parse one decklist line.

    Args:
        line: Raw line text

    Returns:
        DecklistLineRequest for the line

    Raises:
        EmptyLineError: If nothing but whitespace, a comment or a set
            prefix remains
        LineParseError: If the line contains control characters or its
            quantity is above MAX_LINE_QUANTITY
    """
    text = line.split(COMMENT_MARKER, 1)[0].strip()

    if not text:
        raise EmptyLineError(line, "line is empty")

    if _has_control_chars(text):
        raise LineParseError(line, "line contains control characters")

    digits, text = _take_quantity(text)
    quantity = _to_quantity(line, digits)
    set_code, collector_number, text = _take_set(text)

    name = text.strip()
    if not name:
        raise EmptyLineError(line, "line has no card name")

    return DecklistLineRequest(
        name=name,
        quantity=quantity,
        set_code=set_code,
        collector_number=collector_number,
    )


def parse_decklist(text: str, strict: bool = False) -> ParsedDecklist:
    """
    Parse a whole decklist, one card reference per line.

    Empty lines, comment-only lines and lines without a name are dropped.
    Lines that fail the grammar are recorded as failures and never affect
    the other lines.

    Args:
        text: Raw decklist text
        strict: Raise on the first failing line instead of recording it

    Returns:
        ParsedDecklist with requests in decklist order

    Raises:
        DecklistParseError: In strict mode, for the first failing line
    """
    parsed = ParsedDecklist()

    for line_number, line in enumerate(text.splitlines(), 1):
        try:
            parsed.requests.append(parse_line(line))
        except EmptyLineError:
            continue
        except LineParseError as e:
            if strict:
                raise DecklistParseError(line_number, line, e.reason) from e
            logger.warning("Skipping line %d: %s", line_number, e.reason)
            parsed.failures.append(LineFailure(line_number, line, e.reason))

    return parsed
