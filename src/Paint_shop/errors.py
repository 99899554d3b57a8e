# src/Paint_shop/errors.py
from __future__ import annotations

from Paint_shop._constants import NO_SOLUTION_MESSAGE


class PaintShopError(Exception):
    """Base class for every failure the batch pipeline reports to the user."""


class FormatError(PaintShopError, ValueError):
    """Malformed colour-count header or preference line."""


class InputError(PaintShopError):
    """Order file missing or unreadable."""


class NoSolutionError(PaintShopError):
    """The resolver hit a last-option conflict."""

    def __init__(self, message: str = NO_SOLUTION_MESSAGE) -> None:
        super().__init__(message)
