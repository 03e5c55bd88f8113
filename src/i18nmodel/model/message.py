"""Message aggregate and placeholder traversal.

A Message owns its parts tree and its placeholders map. The map's values
are the same objects reachable from parts (shared references, not copies),
so a name written through either path is visible through the other.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from i18nmodel.constants import MAX_DEPTH
from i18nmodel.core.depth_guard import DepthGuard
from i18nmodel.diagnostics import (
    ErrorTemplate,
    PlaceholdersMapError,
    UnsupportedMessagePartError,
)

from .fingerprint import FingerprintPolicy, compose_long_fingerprint
from .parts import MessagePart, Placeholder, TagPair, TextPart

__all__ = ["Message", "PlaceholdersMap", "iter_placeholders"]

type PlaceholdersMap = dict[str, Placeholder]


def iter_placeholders(
    parts: Iterable[MessagePart], *, max_depth: int = MAX_DEPTH
) -> Iterator[Placeholder]:
    """Yield every placeholder reachable from parts in document order.

    A tag pair contributes its begin ref, then its children's placeholders,
    then its end ref.

    Raises:
        DepthLimitExceededError: If tag pairs nest deeper than max_depth
        UnsupportedMessagePartError: If parts contains a non-part object
    """
    yield from _walk(parts, DepthGuard(max_depth=max_depth))


def _walk(parts: Iterable[MessagePart], guard: DepthGuard) -> Iterator[Placeholder]:
    for part in parts:
        match part:
            case TextPart():
                continue
            case TagPair():
                yield part.begin_placeholder_ref
                with guard:
                    yield from _walk(part.parts, guard)
                yield part.end_placeholder_ref
            case _ if isinstance(part, Placeholder):
                yield part
            case _:
                raise UnsupportedMessagePartError(
                    ErrorTemplate.message_part_unsupported(type(part).__qualname__)
                )


@dataclass(frozen=True, slots=True, eq=False)
class Message:
    """Localizable message, the aggregate root handed to serializers.

    Attributes:
        id: Message id, derived elsewhere from the root fingerprint
        meaning: Disambiguates identical text with different intent
        comment: Translator-facing description
        parts: Ordered top-level parts
        placeholders_map: Resolved name to placeholder
    """

    id: str | None
    meaning: str | None
    comment: str | None
    parts: list[MessagePart]
    placeholders_map: PlaceholdersMap

    def to_long_fingerprint(self, policy: FingerprintPolicy | None = None) -> str:
        """Composed long fingerprint of parts."""
        return compose_long_fingerprint(self.parts, policy)

    def iter_placeholders(self, *, max_depth: int = MAX_DEPTH) -> Iterator[Placeholder]:
        """Placeholders reachable from parts, in document order."""
        return iter_placeholders(self.parts, max_depth=max_depth)

    def validate(self, *, max_depth: int = MAX_DEPTH) -> None:
        """Check the placeholders map against the parts tree.

        Every placeholder reachable from parts must carry a name, appear
        exactly once, and be the object the map stores under that name.
        The map must hold nothing else.

        Args:
            max_depth: Maximum tag-pair nesting walked

        Raises:
            DepthLimitExceededError: If tag pairs nest deeper than max_depth
            PlaceholdersMapError: On the first violation found
        """
        seen: dict[str, Placeholder] = {}
        for placeholder in self.iter_placeholders(max_depth=max_depth):
            name = placeholder.name
            if name is None:
                raise PlaceholdersMapError(ErrorTemplate.placeholder_name_missing(placeholder.text))
            if name in seen:
                raise PlaceholdersMapError(ErrorTemplate.placeholder_name_duplicate(name))
            if self.placeholders_map.get(name) is not placeholder:
                reason = (
                    "is missing"
                    if name not in self.placeholders_map
                    else "refers to a different placeholder"
                )
                raise PlaceholdersMapError(ErrorTemplate.placeholders_map_mismatch(name, reason))
            seen[name] = placeholder

        unreachable = sorted(self.placeholders_map.keys() - seen.keys())
        if unreachable:
            raise PlaceholdersMapError(
                ErrorTemplate.placeholders_map_mismatch(unreachable[0], "is not reachable from parts")
            )
