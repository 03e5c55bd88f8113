"""Placeholder naming pass.

Walks a message's parts in document order, turns every name hint into a
name unique within the message, and writes the name back into the
placeholder and into the message's placeholders map. This is the only
mutation step in a message's lifecycle.

Disambiguation:
    One Counter per message, drawn on every suffixed name. The first
    occurrence of a hint keeps the bare hint unless
    NamingConfig.suffix_first_occurrence is set; later occurrences become
    HINT_<n>. A candidate that is already taken is skipped by drawing again.

    A tag pair takes one name N from its hint; its refs are named BEGIN_N
    and END_N. END_N is reserved while the children are named. Refs that
    sit directly in parts (a flattened pair) are named the same way: the
    first ref seen claims N for its pair and the other ref reuses it.

    Example for [<span>, <span>, {{x}}, {{y}}] under the default config:
        BEGIN_SPAN, END_SPAN, BEGIN_SPAN_1, END_SPAN_1, EXPRESSION, EXPRESSION_2

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from i18nmodel.core.counter import Counter
from i18nmodel.core.depth_guard import DepthGuard
from i18nmodel.diagnostics import (
    ErrorTemplate,
    PlaceholdersMapError,
    UnsupportedMessagePartError,
)
from i18nmodel.model.message import Message, PlaceholdersMap
from i18nmodel.model.parts import MessagePart, Placeholder, TagPair, TagPairRefBase, TextPart

from .config import NamingConfig
from .hints import PlaceholderHintResolver, get_default_hint_resolver

__all__ = ["PlaceholderNamer", "assign_placeholder_names", "build_message"]

logger = logging.getLogger(__name__)


class PlaceholderNamer:
    """Assigns unique placeholder names within one message.

    Not reusable across messages: the counter and the claimed names belong
    to a single naming pass. The hint resolver (and its cache) may be shared.
    """

    __slots__ = (
        "_claimed",
        "_config",
        "_counter",
        "_depth_guard",
        "_flat_pair_names",
        "_hint_resolver",
        "_placeholders_map",
        "_reserved",
    )

    def __init__(
        self,
        *,
        config: NamingConfig | None = None,
        hint_resolver: PlaceholderHintResolver | None = None,
    ) -> None:
        self._config = config if config is not None else NamingConfig()
        self._hint_resolver = (
            hint_resolver if hint_resolver is not None else get_default_hint_resolver()
        )
        self._counter = Counter(self._config.counter_start)
        self._depth_guard = DepthGuard(max_depth=self._config.max_depth)
        self._placeholders_map: PlaceholdersMap = {}
        # Names handed out per hint-bearing unit (a placeholder or a whole tag pair).
        self._claimed: set[str] = set()
        # Full names promised to a ref that is not assigned yet.
        self._reserved: set[str] = set()
        self._flat_pair_names: dict[TagPair, str] = {}

    @property
    def placeholders_map(self) -> PlaceholdersMap:
        """Names assigned so far."""
        return self._placeholders_map

    def name_all(self, parts: Iterable[MessagePart]) -> PlaceholdersMap:
        """Name every placeholder reachable from parts.

        Returns:
            The populated placeholders map

        Raises:
            DepthLimitExceededError: If tag pairs nest deeper than configured
            PlaceholdersMapError: If a ref of a flattened pair appears twice
            UnsupportedMessagePartError: If parts contains a non-part object
            UnsupportedTagPairError: If a tag-pair kind has no naming scheme
        """
        self._walk(parts)
        logger.debug("Named %d placeholders", len(self._placeholders_map))
        return self._placeholders_map

    def _walk(self, parts: Iterable[MessagePart]) -> None:
        for part in parts:
            match part:
                case TextPart():
                    continue
                case TagPair():
                    self._name_tag_pair(part)
                case TagPairRefBase(tag_pair=TagPair() as pair):
                    self._name_flat_ref(part, pair)
                case _ if isinstance(part, Placeholder):
                    name = self._claim(self._hint_resolver.resolve_name_hint(part), ("",))
                    self._assign(part, name)
                case _:
                    raise UnsupportedMessagePartError(
                        ErrorTemplate.message_part_unsupported(type(part).__qualname__)
                    )

    def _name_tag_pair(self, pair: TagPair) -> None:
        begin_prefix = self._config.begin_prefix
        end_prefix = self._config.end_prefix
        name = self._claim(self._hint_resolver.resolve_name_hint(pair), (begin_prefix, end_prefix))
        self._assign(pair.begin_placeholder_ref, begin_prefix + name)
        self._reserved.add(end_prefix + name)
        with self._depth_guard:
            self._walk(pair.parts)
        self._assign(pair.end_placeholder_ref, end_prefix + name)

    def _name_flat_ref(self, ref: TagPairRefBase, pair: TagPair) -> None:
        begin_prefix = self._config.begin_prefix
        end_prefix = self._config.end_prefix
        name = self._flat_pair_names.get(pair)
        if name is None:
            name = self._claim(
                self._hint_resolver.resolve_name_hint(pair), (begin_prefix, end_prefix)
            )
            self._flat_pair_names[pair] = name
            self._reserved.update((begin_prefix + name, end_prefix + name))
        prefix = begin_prefix if ref is pair.begin_placeholder_ref else end_prefix
        self._assign(ref, prefix + name)

    def _claim(self, hint: str, prefixes: tuple[str, ...]) -> str:
        """Unique name for hint whose prefixed forms are all still free."""
        candidate = hint
        if self._config.suffix_first_occurrence or not self._is_free(candidate, prefixes):
            candidate = self._next_suffixed(hint, prefixes)
        self._claimed.add(candidate)
        return candidate

    def _next_suffixed(self, hint: str, prefixes: tuple[str, ...]) -> str:
        separator = self._config.suffix_separator
        while True:
            candidate = f"{hint}{separator}{self._counter.next()}"
            if self._is_free(candidate, prefixes):
                return candidate

    def _is_free(self, candidate: str, prefixes: tuple[str, ...]) -> bool:
        if candidate in self._claimed:
            return False
        return all(
            prefix + candidate not in self._placeholders_map
            and prefix + candidate not in self._reserved
            for prefix in prefixes
        )

    def _assign(self, placeholder: Placeholder, name: str) -> None:
        if name in self._placeholders_map:
            raise PlaceholdersMapError(ErrorTemplate.placeholder_name_duplicate(name))
        self._reserved.discard(name)
        placeholder.name = name
        self._placeholders_map[name] = placeholder


def assign_placeholder_names(
    parts: Iterable[MessagePart],
    *,
    config: NamingConfig | None = None,
    hint_resolver: PlaceholderHintResolver | None = None,
) -> PlaceholdersMap:
    """Run one naming pass over parts with a fresh PlaceholderNamer.

    Example:
        >>> parts = [TextPart("Hi "), NgExpr("user.name")]
        >>> placeholders_map = assign_placeholder_names(parts)
        >>> list(placeholders_map)
        ['EXPRESSION']
    """
    namer = PlaceholderNamer(config=config, hint_resolver=hint_resolver)
    return namer.name_all(parts)


def build_message(
    parts: list[MessagePart],
    *,
    id: str | None = None,  # noqa: A002 - mirrors Message.id
    meaning: str | None = None,
    comment: str | None = None,
    config: NamingConfig | None = None,
    hint_resolver: PlaceholderHintResolver | None = None,
) -> Message:
    """Name the placeholders in parts and assemble a validated Message.

    Validation walks the tree under the same depth limit as naming.

    Raises:
        PlaceholdersMapError: If the same placeholder object is reachable
            twice from parts
    """
    config = config if config is not None else NamingConfig()
    placeholders_map = assign_placeholder_names(
        parts, config=config, hint_resolver=hint_resolver
    )
    message = Message(
        id=id,
        meaning=meaning,
        comment=comment,
        parts=parts,
        placeholders_map=placeholders_map,
    )
    message.validate(max_depth=config.max_depth)
    return message
