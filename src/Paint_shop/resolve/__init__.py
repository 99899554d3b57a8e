from __future__ import annotations

from Paint_shop.resolve.choices import next_choice
from Paint_shop.resolve.conflicts import is_valid_choice, unsatisfied_customers
from Paint_shop.resolve.solver import SolveResult, solve, solve_with_diagnostics

__all__ = [
    "next_choice",
    "is_valid_choice",
    "unsatisfied_customers",
    "SolveResult",
    "solve",
    "solve_with_diagnostics",
]
