# src/Paint_shop/_constants.py
from __future__ import annotations

# =============================================================================
# CONSTANTS
# =============================================================================

GLOSS_SYMBOL = "G"
MATTE_SYMBOL = "M"

# Part of the observable interface: printed verbatim by the CLI.
NO_SOLUTION_MESSAGE = "No solution exists"
USAGE_MESSAGE = "Pass in the file name"

BATCH_SEPARATOR = " "

# CLI exit codes
EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2
