"""Enumerations for i18nmodel type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they can be embedded directly in
fingerprints and on-disk serialization.

Python 3.13+.
"""

from enum import StrEnum


class StableTypeName(StrEnum):
    """Persisted identifier of a concrete message part kind.

    These strings are part of the message fingerprint (and therefore the
    message id) and of the on-disk format. They must never change and never
    be reused. Classes may be renamed or restructured freely as long as they
    keep identifying with one of these values.

    StrEnum provides automatic string conversion: StableTypeName.NG_EXPR == "NgExpr"
    """

    TEXT_PART = "TextPart"
    """Literal text."""

    TAG_PAIR_BEGIN_REF = "TagPairBegin"
    """Placeholder standing in for the begin marker of a tag pair."""

    TAG_PAIR_END_REF = "TagPairEnd"
    """Placeholder standing in for the end marker of a tag pair."""

    HTML_TAG_PAIR = "HtmlTagPair"
    """HTML element with nested children."""

    NG_EXPR = "NgExpr"
    """Embedded template expression."""


__all__ = [
    "StableTypeName",
]
