"""Tests for core/loading_cache.py: one loader invocation per key."""

import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed

import pytest
from hypothesis import given
from hypothesis import strategies as st

from i18nmodel.core.loading_cache import LoadingCache


def _counting_loader() -> tuple[Callable[[str], str], list[str]]:
    calls: list[str] = []

    def loader(key: str) -> str:
        calls.append(key)
        return key.upper()

    return loader, calls


class TestLoadingCacheBasics:
    """get(), as_map() and metrics."""

    def test_loader_invoked_once_for_repeated_key(self) -> None:
        """Three get(k) calls invoke the loader exactly once."""
        loader, calls = _counting_loader()
        cache = LoadingCache(loader)

        results = [cache.get("span"), cache.get("span"), cache.get("span")]

        assert results == ["SPAN", "SPAN", "SPAN"]
        assert calls == ["span"]

    def test_distinct_keys_each_loaded(self) -> None:
        """Each distinct key is loaded once."""
        loader, calls = _counting_loader()
        cache = LoadingCache(loader)

        cache.get("a")
        cache.get("b")
        cache.get("a")

        assert calls == ["a", "b"]
        assert len(cache) == 2

    def test_none_values_are_cached(self) -> None:
        """A loader returning None is still invoked only once."""
        calls: list[str] = []

        def loader(key: str) -> None:
            calls.append(key)

        cache: LoadingCache[str, None] = LoadingCache(loader)
        assert cache.get("x") is None
        assert cache.get("x") is None
        assert calls == ["x"]

    def test_as_map_exposes_computed_entries(self) -> None:
        """as_map() shows every computed entry."""
        cache = LoadingCache(str.upper)
        cache.get("b")
        cache.get("i")

        assert dict(cache.as_map()) == {"b": "B", "i": "I"}

    def test_as_map_is_read_only(self) -> None:
        """as_map() cannot be used to mutate the cache."""
        cache = LoadingCache(str.upper)
        cache.get("b")

        view = cache.as_map()
        with pytest.raises(TypeError):
            view["b"] = "bold"  # type: ignore[index]

    def test_as_map_is_live(self) -> None:
        """Entries loaded after as_map() appear in the view."""
        cache = LoadingCache(str.upper)
        view = cache.as_map()
        cache.get("em")

        assert "em" in view

    def test_contains_does_not_load(self) -> None:
        """Membership tests never invoke the loader."""
        loader, calls = _counting_loader()
        cache = LoadingCache(loader)

        assert "a" not in cache
        assert calls == []

    def test_stats(self) -> None:
        """get_stats() reports size, hits and misses."""
        cache = LoadingCache(str.upper)
        cache.get("a")
        cache.get("a")
        cache.get("b")

        assert cache.get_stats() == {"size": 2, "hits": 1, "misses": 2}
        assert cache.hits == 1
        assert cache.misses == 2

    def test_clear_resets_entries_and_metrics(self) -> None:
        """clear() drops entries; the loader runs again afterwards."""
        loader, calls = _counting_loader()
        cache = LoadingCache(loader)
        cache.get("a")

        cache.clear()

        assert len(cache) == 0
        assert cache.get_stats() == {"size": 0, "hits": 0, "misses": 0}
        cache.get("a")
        assert calls == ["a", "a"]


class TestLoadingCacheErrors:
    """Loader failures."""

    def test_loader_exception_propagates_and_is_not_cached(self) -> None:
        """A failing loader stores nothing; the next get() retries."""
        attempts: list[str] = []

        def loader(key: str) -> str:
            attempts.append(key)
            if len(attempts) == 1:
                msg = "table unavailable"
                raise LookupError(msg)
            return key.upper()

        cache = LoadingCache(loader)
        with pytest.raises(LookupError, match="table unavailable"):
            cache.get("a")

        assert "a" not in cache
        assert cache.get("a") == "A"
        assert attempts == ["a", "a"]


class TestLoadingCacheConcurrency:
    """Thread safety of the single-load guarantee."""

    def test_concurrent_gets_load_once(self) -> None:
        """Concurrent get() calls for one key invoke the loader once."""
        calls: list[str] = []
        calls_lock = threading.Lock()

        def slow_loader(key: str) -> str:
            with calls_lock:
                calls.append(key)
            threading.Event().wait(0.01)
            return key.upper()

        cache = LoadingCache(slow_loader)

        with ThreadPoolExecutor(max_workers=10) as executor:
            futures = [executor.submit(cache.get, "span") for _ in range(50)]
            results = [future.result() for future in as_completed(futures)]

        assert all(r == "SPAN" for r in results)
        assert calls == ["span"]


class TestLoadingCacheProperties:
    """Property-based cache invariants."""

    @given(keys=st.lists(st.text(max_size=5), max_size=40))
    def test_loader_calls_equal_distinct_keys(self, keys: list[str]) -> None:
        """PROPERTY: the loader runs once per distinct key, in first-seen order."""
        loader, calls = _counting_loader()
        cache = LoadingCache(loader)

        for key in keys:
            assert cache.get(key) == key.upper()

        assert calls == list(dict.fromkeys(keys))
        assert cache.hits + cache.misses == len(keys)
