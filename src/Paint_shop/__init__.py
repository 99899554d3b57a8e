from __future__ import annotations

# Stable re-exports (keep this list SHORT).
from Paint_shop.errors import FormatError, InputError, NoSolutionError, PaintShopError
from Paint_shop.pipeline import BatchOutcome, OutcomeKind, find_optimal_batch
from Paint_shop.schema import Choice, Colour, Finish

__all__ = [
    "Colour",
    "Choice",
    "Finish",
    "PaintShopError",
    "FormatError",
    "InputError",
    "NoSolutionError",
    "BatchOutcome",
    "OutcomeKind",
    "find_optimal_batch",
]
