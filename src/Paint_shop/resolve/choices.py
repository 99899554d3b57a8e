# src/Paint_shop/resolve/choices.py
from __future__ import annotations

from typing import List, Mapping

from Paint_shop.schema import Choice, Preferences


def next_choice(preferences: Mapping[int, Preferences]) -> List[Choice]:
    """
    Does:
        Build one Choice per customer from the head of their remaining
        preferences, most constrained customers first (fewest options left,
        then lowest customer id).
    """
    choices = [
        Choice(customer_id=cid, colour=prefs[0], remaining=len(prefs))
        for cid, prefs in preferences.items()
    ]
    choices.sort(key=lambda c: (c.remaining, c.customer_id))
    return choices
