"""Configuration for the placeholder naming pass.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from i18nmodel.constants import (
    BEGIN_NAME_PREFIX,
    DEFAULT_COUNTER_START,
    END_NAME_PREFIX,
    MAX_DEPTH,
    NAME_SUFFIX_SEPARATOR,
)

__all__ = ["NamingConfig"]


@dataclass(frozen=True, slots=True)
class NamingConfig:
    """Immutable configuration for placeholder name assignment.

    All fields have sensible defaults; ``NamingConfig()`` reproduces the
    standard naming scheme.

    Attributes:
        counter_start: First disambiguation number drawn per message (default: 1)
        suffix_separator: Joins hint and number, EXPRESSION_2 (default: "_")
        begin_prefix: Prefix of a tag pair's begin ref name (default: "BEGIN_")
        end_prefix: Prefix of a tag pair's end ref name (default: "END_")
        suffix_first_occurrence: If True, every occurrence of a hint is
            suffixed (PH_1, PH_2); if False the first occurrence keeps the
            bare hint (PH, PH_1) (default: False)
        max_depth: Maximum tag-pair nesting walked (default: MAX_DEPTH)

    Example:
        >>> config = NamingConfig(suffix_first_occurrence=True)
        >>> config.counter_start
        1
    """

    counter_start: int = DEFAULT_COUNTER_START
    suffix_separator: str = NAME_SUFFIX_SEPARATOR
    begin_prefix: str = BEGIN_NAME_PREFIX
    end_prefix: str = END_NAME_PREFIX
    suffix_first_occurrence: bool = False
    max_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_depth is not positive, or begin and end
                prefixes are equal (begin and end ref names would collide).
        """
        if self.max_depth <= 0:
            msg = "max_depth must be positive"
            raise ValueError(msg)
        if self.begin_prefix == self.end_prefix:
            msg = "begin_prefix and end_prefix must differ"
            raise ValueError(msg)
