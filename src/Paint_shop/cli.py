# src/Paint_shop/cli.py
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from Paint_shop._constants import EXIT_FAILED, EXIT_OK, EXIT_USAGE, USAGE_MESSAGE
from Paint_shop.pipeline import BatchConfig, find_optimal_batch
from Paint_shop.report.formatter import batch_frame, batch_summary

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="paint-shop",
        description="Pick gloss or matte for every colour so each customer gets one acceptable paint.",
    )
    p.add_argument("path", nargs="?", help="Order file: colour count, then one customer per line.")
    p.add_argument("--out", type=str, default=None, help="Optional CSV path for the per-colour batch table.")
    p.add_argument("--strict", action="store_true", help="Reject colour codes beyond the colour count.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log resolution rounds to stderr.")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.path:
        print(USAGE_MESSAGE)
        p.print_usage()
        return EXIT_USAGE

    outcome = find_optimal_batch(args.path, BatchConfig(strict=bool(args.strict)))
    print(outcome.text)
    if not outcome.ok:
        return EXIT_FAILED

    if args.out and outcome.book is not None:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        frame = batch_frame(outcome.assignment, outcome.book.colour_count)
        frame.to_csv(out_path, index=False)
        log.debug("wrote %s %s", out_path.as_posix(), batch_summary(frame))

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
