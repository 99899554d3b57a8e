# src/Paint_shop/io/orders.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from Paint_shop.errors import FormatError, InputError
from Paint_shop.schema import Colour, CustomerPreferences, Preferences, sort_preferences

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderBook:
    """
    Does:
        Hold the parsed order file: how many colour codes exist and each
        customer's sorted preferences, keyed by 1-based id in file order.
    """
    colour_count: int
    customers: CustomerPreferences = field(default_factory=dict)

    @property
    def all_codes(self) -> range:
        return range(1, self.colour_count + 1)


# ---------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------

def parse_line(line: str) -> Preferences:
    """
    Does:
        Parse one customer line ("1 M 3 G 5 G") into preferences sorted
        gloss first, then by code.
    Raises:
        FormatError on an empty line, an odd token count, a bad code or a bad finish.
    """
    tokens = line.split()
    if not tokens or len(tokens) % 2 != 0:
        raise FormatError(f"Badly formatted file. Unable to parse this line {line}")

    colours = [Colour.parse(tokens[i], tokens[i + 1]) for i in range(0, len(tokens), 2)]
    return sort_preferences(colours)


def _parse_colour_count(line: str) -> int:
    token = line.strip()
    if not (token.isascii() and token.isdigit()):
        raise FormatError(f"Badly formatted colour count: {token}")
    return int(token)


def parse_lines(lines: Iterable[str]) -> OrderBook:
    """
    Does:
        Build an OrderBook from raw text lines. The first non-blank line is the
        colour count; every later line is one customer, blank lines included.
    """
    colour_count: Optional[int] = None
    customers: CustomerPreferences = {}
    customer_id = 1

    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if colour_count is None:
            if not line.strip():
                continue
            colour_count = _parse_colour_count(line)
            continue
        try:
            customers[customer_id] = parse_line(line)
        except FormatError as e:
            raise FormatError(f"line {lineno}: {e}") from e
        customer_id += 1

    if colour_count is None:
        raise FormatError("Missing colour count")

    log.debug("parsed %d customers over %d colours", len(customers), colour_count)
    return OrderBook(colour_count=colour_count, customers=customers)


# ---------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------

def parse_file(path: Union[str, Path]) -> OrderBook:
    """
    Does:
        Read and parse an order file.
    Raises:
        InputError if the file cannot be read; FormatError if it is malformed.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        reason = getattr(e, "strerror", None) or str(e)
        raise InputError(f"Unable to read {p}: {reason}") from e

    lines: List[str] = text.splitlines()
    return parse_lines(lines)
