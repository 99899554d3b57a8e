# src/Paint_shop/report/formatter.py
from __future__ import annotations

from typing import Any, Dict, Iterable

import numpy as np
import pandas as pd

from Paint_shop._constants import BATCH_SEPARATOR
from Paint_shop.schema import Assignment, Finish


def map_to_string(
    assignment: Assignment,
    all_codes: Iterable[int],
    *,
    sep: str = BATCH_SEPARATOR,
) -> str:
    """
    Does:
        Render one finish symbol per colour code in ascending code order.
        Codes nobody constrained are produced in gloss, the cheaper finish.
    """
    return sep.join(assignment.get(code, Finish.GLOSS).value for code in sorted(all_codes))


def batch_frame(assignment: Assignment, colour_count: int) -> pd.DataFrame:
    """
    Does:
        Tabulate the batch: one row per code 1..colour_count with its finish
        and whether a customer fixed it (False means gloss by default).
    """
    codes = np.arange(1, colour_count + 1, dtype=int)
    constrained = np.array([int(c) in assignment for c in codes], dtype=bool)
    finishes = [assignment.get(int(c), Finish.GLOSS).value for c in codes]
    return pd.DataFrame(
        {
            "code": codes,
            "finish": pd.Series(finishes, dtype=object),
            "constrained": constrained,
        }
    )


def batch_summary(frame: pd.DataFrame) -> Dict[str, Any]:
    is_matte = (frame["finish"] == Finish.MATTE.value).to_numpy()
    return {
        "colours": int(len(frame)),
        "gloss": int(np.count_nonzero(~is_matte)),
        "matte": int(np.count_nonzero(is_matte)),
        "constrained": int(frame["constrained"].sum()),
    }


__all__ = ["map_to_string", "batch_frame", "batch_summary"]
