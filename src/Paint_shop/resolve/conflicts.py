# src/Paint_shop/resolve/conflicts.py
from __future__ import annotations

from typing import List, Mapping

from Paint_shop.schema import Assignment, Choice, Finish, Preferences


def is_valid_choice(assignment: Assignment, choice: Choice) -> bool:
    """
    Does:
        True when the choice's colour code is still free, or is already
        committed with the same finish.
    """
    committed = assignment.get(choice.colour.code)
    return committed is None or committed == choice.colour.finish


def unsatisfied_customers(
    preferences: Mapping[int, Preferences],
    assignment: Assignment,
) -> List[int]:
    """
    Does:
        List customer ids with no preference matching the assignment.
        Unassigned codes count as gloss, the same way the batch is printed.
    """
    out: List[int] = []
    for cid, prefs in preferences.items():
        if not any(assignment.get(c.code, Finish.GLOSS) == c.finish for c in prefs):
            out.append(cid)
    return out


__all__ = ["is_valid_choice", "unsatisfied_customers"]
