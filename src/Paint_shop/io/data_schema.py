# src/Paint_shop/io/data_schema.py
from __future__ import annotations

import logging
from typing import Dict, List

from Paint_shop.errors import FormatError
from Paint_shop.io.orders import OrderBook

log = logging.getLogger(__name__)


def out_of_range_codes(book: OrderBook) -> Dict[int, List[int]]:
    """
    Does:
        Return customer id -> sorted codes that fall outside 1..colour_count.
    """
    out: Dict[int, List[int]] = {}
    for customer_id, prefs in book.customers.items():
        bad = sorted({c.code for c in prefs if c.code > book.colour_count})
        if bad:
            out[customer_id] = bad
    return out


def validate_order_book(book: OrderBook, *, strict: bool = False) -> None:
    offending = out_of_range_codes(book)
    if not offending:
        return

    if strict:
        customer_id, codes = next(iter(offending.items()))
        raise FormatError(
            f"customer {customer_id}: colour codes {codes} exceed colour count {book.colour_count}"
        )

    # the batch only lists 1..colour_count, so these codes are resolved but never printed
    for customer_id, codes in offending.items():
        log.warning(
            "customer %d references colour codes %s beyond colour count %d",
            customer_id,
            codes,
            book.colour_count,
        )
