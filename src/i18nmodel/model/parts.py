"""Message part node definitions.

A message is an ordered sequence of parts: literal text, placeholders, and
tag pairs that nest further parts. Each concrete kind registers a stable
type name (see registry.py) and exposes to_long_fingerprint(), a pure
function of its content-relevant fields. Placeholder names are excluded
from fingerprints since they are resolved after fingerprinting.

Mutability:
    TextPart is a frozen value. Placeholders are mutable entities: the
    naming pass writes their name in place, and a message's placeholders
    map holds the very objects reachable from its parts. Placeholders and
    tag pairs therefore compare by identity (eq=False).

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from i18nmodel.diagnostics import (
    ErrorTemplate,
    TagPairOwnershipError,
    UnimplementedFingerprintError,
)
from i18nmodel.enums import StableTypeName

from .registry import stable_type

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Capabilities
    "MessagePartBase",
    "Placeholder",
    # Concrete kinds
    "TextPart",
    "PlaceholderBase",
    "NgExpr",
    "TagPairRefBase",
    "TagPairBeginRef",
    "TagPairEndRef",
    "TagPair",
    "HtmlTagPair",
    # Type aliases
    "MessagePart",
]

# ============================================================================
# CAPABILITIES
# ============================================================================


class MessagePartBase(Protocol):
    """Anything that can appear in a message's parts."""

    def to_long_fingerprint(self) -> str:
        """Deterministic content fingerprint, free of side effects."""
        ...


@runtime_checkable
class Placeholder(MessagePartBase, Protocol):
    """Named substitution point standing in for non-literal content.

    Attributes:
        name: Resolved name, None until the naming pass runs
        text: Literal source text the placeholder stands in for
        examples: Sample renderings shown to translators (optional)
        comment: Translator-facing note (optional)
    """

    name: str | None
    text: str
    examples: list[str] | None
    comment: str | None


# ============================================================================
# TEXT
# ============================================================================


@stable_type(StableTypeName.TEXT_PART)
@dataclass(frozen=True, slots=True)
class TextPart:
    """Literal text."""

    value: str

    def to_long_fingerprint(self) -> str:
        # degenerate case.
        return self.value


# ============================================================================
# PLACEHOLDERS
# ============================================================================


@dataclass(slots=True, eq=False)
class PlaceholderBase:
    """Shared state of placeholder kinds.

    Not registered and not usable on its own: to_long_fingerprint() raises
    so every placeholder subtype must supply a real fingerprint rule.
    """

    text: str
    name: str | None = None
    examples: list[str] | None = None
    comment: str | None = None

    def to_long_fingerprint(self) -> str:
        """Abstract fingerprint rule.

        Raises:
            UnimplementedFingerprintError: Always
        """
        raise UnimplementedFingerprintError(
            ErrorTemplate.fingerprint_unimplemented(type(self).__qualname__)
        )


@stable_type(StableTypeName.NG_EXPR)
@dataclass(slots=True, eq=False)
class NgExpr(PlaceholderBase):
    """Embedded template expression, e.g. the ``ctrl.count`` in ``{{ctrl.count}}``.

    The fingerprint prefixes the expression text with the stable type name.
    Expression text is taken verbatim unless a canonicalizer is supplied;
    proper canonicalization is a policy owned by the caller.
    """

    def to_long_fingerprint(self, canonicalize: Callable[[str], str] | None = None) -> str:
        text = self.text if canonicalize is None else canonicalize(self.text)
        return StableTypeName.NG_EXPR + text


# TagPairs, when serialized, use a pair of placeholders to represent their
# begin and end. TagPairBeginRef and TagPairEndRef are those placeholders.


@dataclass(slots=True, eq=False)
class TagPairRefBase(PlaceholderBase):
    """Placeholder standing in for one marker of a tag pair.

    Attributes:
        tag_pair: The pair owning this ref, set when the pair is constructed
    """

    tag_pair: TagPair | None = field(default=None, repr=False)

    def to_long_fingerprint(self) -> str:
        # degenerate case.
        return self.text


@stable_type(StableTypeName.TAG_PAIR_BEGIN_REF)
@dataclass(slots=True, eq=False)
class TagPairBeginRef(TagPairRefBase):
    """Begin marker placeholder (e.g. ``<span class="x">``)."""


@stable_type(StableTypeName.TAG_PAIR_END_REF)
@dataclass(slots=True, eq=False)
class TagPairEndRef(TagPairRefBase):
    """End marker placeholder (e.g. ``</span>``)."""


# ============================================================================
# TAG PAIRS
# ============================================================================


@dataclass(slots=True, eq=False)
class TagPair:
    """Matched open/close markup span with nested children.

    The fingerprint is the precomputed tag_fingerprint_long, established once
    by the parser from the pair's semantic content. It is NOT recomputed
    from begin/end/parts, so a pair's identity stays stable even if the
    general composition rule changes.

    Attributes:
        tag: Tag name, e.g. "span" for the HTML <span> tag
        begin: Original full begin tag with all attributes, as is
        end: Original full end tag
        parts: Ordered children
        examples: Sample renderings of the whole span
        tag_fingerprint_long: Canonical key of the pair
        begin_placeholder_ref: Placeholder for the begin marker
        end_placeholder_ref: Placeholder for the end marker
    """

    tag: str
    begin: str
    end: str
    parts: list[MessagePart]
    examples: list[str] | None
    tag_fingerprint_long: str
    begin_placeholder_ref: TagPairBeginRef
    end_placeholder_ref: TagPairEndRef

    def __post_init__(self) -> None:
        """Claim exclusive ownership of both refs.

        Raises:
            TagPairOwnershipError: If a ref already belongs to another pair
        """
        for ref in (self.begin_placeholder_ref, self.end_placeholder_ref):
            if ref.tag_pair is not None and ref.tag_pair is not self:
                raise TagPairOwnershipError(ErrorTemplate.tag_pair_ref_shared(ref.text))
            ref.tag_pair = self

    def to_long_fingerprint(self) -> str:
        return self.tag_fingerprint_long


@stable_type(StableTypeName.HTML_TAG_PAIR)
@dataclass(slots=True, eq=False)
class HtmlTagPair(TagPair):
    """Tag pair for HTML-syntax tags."""

    @classmethod
    def new_for_parsing(
        cls,
        tag: str,
        begin: str,
        end: str,
        parts: list[MessagePart],
        examples: list[str] | None,
        tag_fingerprint_long: str,
    ) -> HtmlTagPair:
        """Build a pair together with its two fresh, unnamed refs.

        The sole legitimate way to build an HtmlTagPair while parsing.
        Names are resolved much later by the naming pass.

        Example:
            >>> pair = HtmlTagPair.new_for_parsing(
            ...     "b", "<b>", "</b>", [TextPart("bold")], ["<b>bold</b>"], "HtmlTagPair:b"
            ... )
            >>> pair.begin_placeholder_ref.comment
            'Begin HTML <b> tag'
        """
        begin_placeholder_ref = TagPairBeginRef(
            text=begin,
            examples=[begin],
            comment=f"Begin HTML <{tag}> tag",
        )
        end_placeholder_ref = TagPairEndRef(
            text=end,
            examples=[end],
            comment=f"End HTML </{tag}> tag",
        )
        return cls(
            tag,
            begin,
            end,
            parts,
            examples,
            tag_fingerprint_long,
            begin_placeholder_ref,
            end_placeholder_ref,
        )


# ============================================================================
# TYPE ALIASES
# ============================================================================

type MessagePart = TextPart | Placeholder | TagPair
