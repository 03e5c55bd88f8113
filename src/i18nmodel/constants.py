"""Shared constants for i18nmodel.

Centralized configuration constants used by the model and naming packages.
Placing constants here avoids circular imports and provides a single source
of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for tag-pair tree walks
- Naming: Hints, prefixes and separators used to build placeholder names
- Counter: Disambiguation counter defaults

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Naming
    "EXPRESSION_HINT",
    "GENERIC_PLACEHOLDER_HINT",
    "NAME_SUFFIX_SEPARATOR",
    "BEGIN_NAME_PREFIX",
    "END_NAME_PREFIX",
    # Counter
    "DEFAULT_COUNTER_START",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum tag-pair nesting walked by the naming pass and placeholder iteration.
# Real markup rarely nests beyond 10 levels; 100 is clearly malformed input.
MAX_DEPTH: int = 100

# ============================================================================
# NAMING
# ============================================================================

# Hint for expression placeholders (NgExpr).
EXPRESSION_HINT: str = "EXPRESSION"

# Hint for any placeholder kind without a more specific rule.
GENERIC_PLACEHOLDER_HINT: str = "PH"

# Joins a hint and its disambiguation number: EXPRESSION_2
NAME_SUFFIX_SEPARATOR: str = "_"

# Tag-pair refs are named from their pair's name: BEGIN_SPAN / END_SPAN
BEGIN_NAME_PREFIX: str = "BEGIN_"
END_NAME_PREFIX: str = "END_"

# ============================================================================
# COUNTER
# ============================================================================

# First value drawn from a fresh Counter (itertools.count(1) semantics).
DEFAULT_COUNTER_START: int = 1
