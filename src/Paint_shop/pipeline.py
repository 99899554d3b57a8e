# src/Paint_shop/pipeline.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from Paint_shop._constants import BATCH_SEPARATOR
from Paint_shop.errors import FormatError, InputError, NoSolutionError
from Paint_shop.io.data_schema import validate_order_book
from Paint_shop.io.orders import OrderBook, parse_file
from Paint_shop.report.formatter import map_to_string
from Paint_shop.resolve.solver import solve_with_diagnostics
from Paint_shop.schema import Finish

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class BatchConfig:
    separator: str = BATCH_SEPARATOR
    strict: bool = False    # codes beyond the colour count are an error


# ---------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------

class OutcomeKind(str, Enum):
    OK = "ok"
    FORMAT_ERROR = "format_error"
    IO_ERROR = "io_error"
    NO_SOLUTION = "no_solution"


@dataclass(frozen=True)
class BatchOutcome:
    """
    Does:
        Carry either the rendered batch or exactly one error message, never both.
    """
    kind: OutcomeKind
    text: str
    assignment: Dict[int, Finish] = field(default_factory=dict)
    book: Optional[OrderBook] = None
    diagnostics: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.kind == OutcomeKind.OK


def find_optimal_batch(path: Union[str, Path], cfg: BatchConfig = BatchConfig()) -> BatchOutcome:
    """
    Does:
        Parse the order file, resolve it and render the batch.
    Returns:
        BatchOutcome; parse, read and resolution failures become its message.
    """
    try:
        book = parse_file(path)
        validate_order_book(book, strict=cfg.strict)
    except InputError as e:
        return BatchOutcome(kind=OutcomeKind.IO_ERROR, text=str(e))
    except FormatError as e:
        return BatchOutcome(kind=OutcomeKind.FORMAT_ERROR, text=str(e))

    try:
        result = solve_with_diagnostics(book.customers)
    except NoSolutionError as e:
        log.debug("no batch for %s", path)
        return BatchOutcome(kind=OutcomeKind.NO_SOLUTION, text=str(e), book=book)

    text = map_to_string(result.assignment, book.all_codes, sep=cfg.separator)
    log.debug("batch for %s: %s (%s)", path, text, result.diagnostics)
    return BatchOutcome(
        kind=OutcomeKind.OK,
        text=text,
        assignment=result.assignment,
        book=book,
        diagnostics=result.diagnostics,
    )


__all__ = ["BatchConfig", "OutcomeKind", "BatchOutcome", "find_optimal_batch"]
