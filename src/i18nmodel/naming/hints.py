"""Placeholder name hints.

A name hint is a suggested, possibly non-unique label for a placeholder:

    tag pair (or one of its refs)  -> per-tag naming table, HTML pairs only
    NgExpr                         -> "EXPRESSION"
    anything else                  -> "PH"

Tag-pair kinds other than HtmlTagPair are refused outright. A new kind needs
a deliberate naming scheme rather than an automatic one, and failing here
forces that decision before the kind ships.

Per-tag hints go through a LoadingCache, so the naming table is consulted at
most once per tag for the resolver's lifetime.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from functools import lru_cache

from i18nmodel.constants import EXPRESSION_HINT, GENERIC_PLACEHOLDER_HINT
from i18nmodel.core.loading_cache import LoadingCache
from i18nmodel.diagnostics import (
    ErrorTemplate,
    TagPairOwnershipError,
    UnsupportedTagPairError,
)
from i18nmodel.enums import StableTypeName
from i18nmodel.model.parts import NgExpr, Placeholder, TagPair, TagPairRefBase
from i18nmodel.model.registry import DEFAULT_REGISTRY, StableTypeRegistry

__all__ = [
    "PlaceholderHintResolver",
    "get_default_hint_resolver",
    "resolve_name_hint",
    "uppercase_tag_hint",
]

logger = logging.getLogger(__name__)

type TagHintTable = Callable[[str], str]

_NON_IDENTIFIER = re.compile(r"[^0-9A-Za-z]+")


def uppercase_tag_hint(tag: str) -> str:
    """Generic per-tag hint: the tag name as an upper-case identifier.

    Example:
        >>> uppercase_tag_hint("my-widget")
        'MY_WIDGET'
    """
    return _NON_IDENTIFIER.sub("_", tag).strip("_").upper() or "TAG"


class PlaceholderHintResolver:
    """Computes name hints, caching per-tag lookups.

    One resolver may be shared across messages; its cache then spans them.

    Attributes:
        tag_hints: Cache of the per-tag hints computed so far
    """

    __slots__ = ("_html_tag_hints", "_registry")

    def __init__(
        self,
        html_tag_hint: TagHintTable = uppercase_tag_hint,
        *,
        registry: StableTypeRegistry | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            html_tag_hint: Per-tag naming table for HTML tag pairs
            registry: Registry used to identify tag-pair kinds
                (default: DEFAULT_REGISTRY)
        """
        self._html_tag_hints: LoadingCache[str, str] = LoadingCache(html_tag_hint)
        self._registry = registry if registry is not None else DEFAULT_REGISTRY

    def resolve_name_hint(self, placeholder: Placeholder | TagPair) -> str:
        """Name hint for a placeholder, a tag-pair ref, or a tag pair.

        Raises:
            StableTypeNameError: If a tag pair's kind is not registered
            TagPairOwnershipError: If a tag-pair ref has no owning pair
            UnsupportedTagPairError: If the tag-pair kind has no naming scheme
        """
        match placeholder:
            case TagPair():
                return self._tag_pair_hint(placeholder)
            case TagPairRefBase(tag_pair=TagPair() as pair):
                return self._tag_pair_hint(pair)
            case TagPairRefBase():
                raise TagPairOwnershipError(ErrorTemplate.tag_pair_ref_orphaned(placeholder.text))
            case NgExpr():
                return EXPRESSION_HINT
            case _:
                return GENERIC_PLACEHOLDER_HINT

    def _tag_pair_hint(self, pair: TagPair) -> str:
        type_name = self._registry.get_stable_type_name(pair)
        match type_name:
            case StableTypeName.HTML_TAG_PAIR:
                return self._html_tag_hints.get(pair.tag)
            case _:
                raise UnsupportedTagPairError(ErrorTemplate.tag_pair_kind_unsupported(type_name))

    @property
    def tag_hints(self) -> LoadingCache[str, str]:
        """Per-tag hint cache (exposed for inspection and metrics)."""
        return self._html_tag_hints


@lru_cache(maxsize=1)
def get_default_hint_resolver() -> PlaceholderHintResolver:
    """Process-wide resolver using uppercase_tag_hint (created once)."""
    logger.debug("Creating default placeholder hint resolver")
    return PlaceholderHintResolver()


def resolve_name_hint(placeholder: Placeholder | TagPair) -> str:
    """Name hint from the process-wide default resolver."""
    return get_default_hint_resolver().resolve_name_hint(placeholder)
