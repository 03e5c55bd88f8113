"""Long fingerprint computation over message parts.

The long fingerprint of a parts sequence is the concatenation of each
part's fingerprint in sequence order. Recursion stops at the leaf kinds:

    TextPart         -> value
    TagPairBeginRef  -> text
    TagPairEndRef    -> text
    NgExpr           -> "NgExpr" + canonical(text)
    TagPair          -> tag_fingerprint_long (precomputed, never recursed)

These rules and the stable type names are de facto a persisted format:
changing either changes message identity for previously extracted
messages.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from i18nmodel.diagnostics import ErrorTemplate, UnsupportedMessagePartError

from .parts import MessagePart, NgExpr, PlaceholderBase, TagPair, TextPart

__all__ = [
    "DEFAULT_FINGERPRINT_POLICY",
    "FingerprintPolicy",
    "compose_long_fingerprint",
    "long_fingerprint",
]


def _verbatim(text: str) -> str:
    return text


@dataclass(frozen=True, slots=True)
class FingerprintPolicy:
    """Pluggable parts of the fingerprint algorithm.

    Attributes:
        canonicalize_expression: Maps NgExpr source text to its canonical
            form before fingerprinting (default: verbatim). A canonicalizer
            that ignores insignificant whitespace, for example, makes
            ``{{ a }}`` and ``{{a}}`` the same message.
    """

    canonicalize_expression: Callable[[str], str] = _verbatim


DEFAULT_FINGERPRINT_POLICY = FingerprintPolicy()


def long_fingerprint(part: object, policy: FingerprintPolicy | None = None) -> str:
    """Long fingerprint of a single part.

    Args:
        part: Message part
        policy: Fingerprint policy (default: DEFAULT_FINGERPRINT_POLICY)

    Returns:
        Fingerprint string

    Raises:
        UnimplementedFingerprintError: If part is a bare PlaceholderBase
        UnsupportedMessagePartError: If part is not a message part
    """
    policy = policy if policy is not None else DEFAULT_FINGERPRINT_POLICY
    match part:
        case NgExpr():
            return part.to_long_fingerprint(policy.canonicalize_expression)
        case TextPart() | TagPair() | PlaceholderBase():
            return part.to_long_fingerprint()
        case _ if callable(getattr(part, "to_long_fingerprint", None)):
            # Extension kinds registered outside this package.
            fingerprint: str = part.to_long_fingerprint()  # type: ignore[attr-defined]
            return fingerprint
        case _:
            raise UnsupportedMessagePartError(
                ErrorTemplate.message_part_unsupported(type(part).__qualname__)
            )


def compose_long_fingerprint(
    parts: Iterable[MessagePart], policy: FingerprintPolicy | None = None
) -> str:
    """Concatenate the long fingerprints of parts in sequence order."""
    return "".join(long_fingerprint(part, policy) for part in parts)
