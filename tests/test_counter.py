"""Tests for core/counter.py: monotonic disambiguation counter."""

from hypothesis import given
from hypothesis import strategies as st

from i18nmodel.constants import DEFAULT_COUNTER_START
from i18nmodel.core.counter import Counter


class TestCounter:
    """Counter semantics."""

    def test_default_start_is_one(self) -> None:
        """A fresh Counter() starts at 1."""
        counter = Counter()
        assert counter.next() == 1
        assert DEFAULT_COUNTER_START == 1

    def test_custom_start(self) -> None:
        """Counter(5) yields 5, 6, 7."""
        counter = Counter(5)
        assert [counter.next(), counter.next(), counter.next()] == [5, 6, 7]

    def test_zero_start_is_honored(self) -> None:
        """0 is a valid start, not treated as missing."""
        assert Counter(0).next() == 0

    def test_peek_does_not_advance(self) -> None:
        """peek() reports the upcoming value without consuming it."""
        counter = Counter(3)
        assert counter.peek() == 3
        assert counter.peek() == 3
        assert counter.next() == 3
        assert counter.peek() == 4

    def test_iterator_protocol(self) -> None:
        """Counter works with next() and zip()."""
        counter = Counter(10)
        assert next(counter) == 10
        assert [n for n, _ in zip(counter, range(3), strict=False)] == [11, 12, 13]

    def test_repr_shows_next_value(self) -> None:
        """repr names the upcoming value."""
        assert repr(Counter(7)) == "Counter(next=7)"


class TestCounterProperties:
    """Property-based counter invariants."""

    @given(start=st.integers(min_value=-1000, max_value=10**12), draws=st.integers(1, 50))
    def test_strictly_increasing_without_gaps(self, start: int, draws: int) -> None:
        """PROPERTY: n draws from Counter(s) are exactly s..s+n-1."""
        counter = Counter(start)
        values = [counter.next() for _ in range(draws)]
        assert values == list(range(start, start + draws))
