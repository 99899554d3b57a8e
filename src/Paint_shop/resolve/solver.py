# src/Paint_shop/resolve/solver.py
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, Mapping

from Paint_shop.errors import NoSolutionError
from Paint_shop.resolve.choices import next_choice
from Paint_shop.resolve.conflicts import is_valid_choice
from Paint_shop.schema import Choice, Finish, Preferences

log = logging.getLogger(__name__)


@dataclass
class SolveState:
    """
    Does:
        Carry what one resolution step needs: customers still waiting, the
        committed finishes so far, and the rest of the current round.
    """
    remaining: Dict[int, Preferences]
    assignment: Dict[int, Finish] = field(default_factory=dict)
    pending: Deque[Choice] = field(default_factory=deque)


@dataclass(frozen=True)
class SolveResult:
    assignment: Dict[int, Finish]
    diagnostics: Dict[str, Any] = field(default_factory=dict)


def solve_with_diagnostics(preferences: Mapping[int, Preferences]) -> SolveResult:
    """
    Does:
        Resolve every customer to one committed colour, round by round.

    Rules:
      1) A round starts by taking each waiting customer's best remaining option,
         most constrained customers first.
      2) An option that agrees with the committed finishes is committed for good
         and the customer is done.
      3) A conflicting option is dropped and the customer waits for the next
         round, unless it was their last option: then there is no solution.
      Committed finishes are never revisited, so some satisfiable inputs are
      reported as unsolvable.

    Raises:
        NoSolutionError on a last-option conflict or a customer with no options.
    """
    for cid, prefs in preferences.items():
        if not prefs:
            log.debug("customer %d has no acceptable colours", cid)
            raise NoSolutionError()

    state = SolveState(remaining=dict(preferences))
    rounds = commits = deferrals = 0

    while state.remaining:
        if not state.pending:
            state.pending.extend(next_choice(state.remaining))
            rounds += 1
            log.debug("round %d: %d customers waiting", rounds, len(state.pending))

        choice = state.pending.popleft()
        cid = choice.customer_id

        if is_valid_choice(state.assignment, choice):
            state.assignment[choice.colour.code] = choice.colour.finish
            del state.remaining[cid]
            commits += 1
            log.debug("customer %d commits %s", cid, choice.colour)
        elif choice.remaining == 1:
            log.debug("customer %d: last option %s conflicts", cid, choice.colour)
            raise NoSolutionError()
        else:
            state.remaining[cid] = state.remaining[cid][1:]
            deferrals += 1
            log.debug("customer %d defers %s", cid, choice.colour)

    diagnostics: Dict[str, Any] = {
        "customers": len(preferences),
        "rounds": rounds,
        "commits": commits,
        "deferrals": deferrals,
    }
    return SolveResult(assignment=state.assignment, diagnostics=diagnostics)


def solve(preferences: Mapping[int, Preferences]) -> Dict[int, Finish]:
    """Does: return the committed code -> finish mapping, or raise NoSolutionError."""
    return solve_with_diagnostics(preferences).assignment
