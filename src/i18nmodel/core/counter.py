"""Monotonic integer counter for placeholder name disambiguation.

Same semantics as itertools.count(start), with the upcoming value
inspectable. One Counter per message naming pass.

Python 3.13+.
"""

from __future__ import annotations

from i18nmodel.constants import DEFAULT_COUNTER_START

__all__ = ["Counter"]


class Counter:
    """Stateful generator of consecutive integers.

    No upper bound is enforced; a consumer that needs bounded
    disambiguation must check the drawn value itself.

    Example:
        >>> counter = Counter(5)
        >>> counter.next(), counter.next(), counter.next()
        (5, 6, 7)
    """

    __slots__ = ("_current",)

    def __init__(self, initial: int | None = None) -> None:
        """Initialize counter.

        Args:
            initial: First value returned by next() (default: 1)
        """
        self._current = DEFAULT_COUNTER_START if initial is None else initial

    def next(self) -> int:
        """Return the current value and advance by one."""
        value = self._current
        self._current += 1
        return value

    def peek(self) -> int:
        """Value the next call to next() will return."""
        return self._current

    def __iter__(self) -> Counter:
        return self

    def __next__(self) -> int:
        return self.next()

    def __repr__(self) -> str:
        return f"Counter(next={self._current})"
