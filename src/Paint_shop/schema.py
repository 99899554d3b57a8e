# src/Paint_shop/schema.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Dict, Mapping, Tuple

from Paint_shop._constants import GLOSS_SYMBOL, MATTE_SYMBOL
from Paint_shop.errors import FormatError


# ---------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------

class Finish(str, Enum):
    GLOSS = GLOSS_SYMBOL
    MATTE = MATTE_SYMBOL

    @property
    def rank(self) -> int:
        # gloss is the cheaper finish and always sorts first
        return 0 if self is Finish.GLOSS else 1

    @classmethod
    def parse(cls, token: str) -> "Finish":
        """
        Does:
            Map a raw finish token (exactly "G" or "M") to a Finish.
        """
        for f in cls:
            if f.value == token:
                return f
        raise FormatError(f"Unexpected colour finish found: {token}")


# ---------------------------------------------------------------------
# Core objects
# ---------------------------------------------------------------------

@total_ordering
@dataclass(frozen=True, slots=True)
class Colour:
    """
    Does:
        Identify a paint colour code together with the finish a customer accepts.
        Ordering is by (finish, code), so gloss options sort before matte ones.
    """
    code: int
    finish: Finish

    @property
    def sort_key(self) -> Tuple[int, int]:
        return (self.finish.rank, self.code)

    def __lt__(self, other: "Colour") -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return f"{self.code} {self.finish.value}"

    @classmethod
    def parse(cls, code_token: str, finish_token: str) -> "Colour":
        # plain ASCII digits only
        if not (code_token.isascii() and code_token.isdigit()) or int(code_token) < 1:
            raise FormatError(f"Unexpected colour code found: {code_token}")
        return cls(code=int(code_token), finish=Finish.parse(finish_token))


@dataclass(frozen=True, slots=True)
class Choice:
    """
    Does:
        Hold one customer's best remaining option for the current round and
        how many options that customer has left (this one included).
    """
    customer_id: int
    colour: Colour
    remaining: int


# A customer's acceptable colours, most preferred first.
Preferences = Tuple[Colour, ...]

# colour code -> committed finish
Assignment = Mapping[int, Finish]

# customer id -> preferences, in customer-id order
CustomerPreferences = Dict[int, Preferences]


def sort_preferences(colours) -> Preferences:
    """Does: order colours gloss first, then by lowest code."""
    return tuple(sorted(colours))
