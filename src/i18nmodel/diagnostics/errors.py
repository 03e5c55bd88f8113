"""i18nmodel exception hierarchy with structured diagnostics.

Every error here is a programming error (a defect in registration code, a
missing fingerprint rule, a tag-pair kind without a naming scheme, or a
malformed part tree). They propagate immediately and are never retried.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "MessageModelError",
    "PlaceholdersMapError",
    "StableTypeNameError",
    "TagPairOwnershipError",
    "UnimplementedFingerprintError",
    "UnsupportedMessagePartError",
    "UnsupportedTagPairError",
]


class MessageModelError(Exception):
    """Base exception for all i18nmodel errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageModelError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class StableTypeNameError(MessageModelError):
    """Stable type registry misuse.

    Raised for a reused name, a kind registered twice, a lookup for an
    unregistered kind, or registration on a frozen registry.
    """


class UnimplementedFingerprintError(MessageModelError, NotImplementedError):
    """Abstract fingerprint rule invoked directly.

    Only PlaceholderBase raises this; every usable placeholder kind
    overrides to_long_fingerprint().
    """


class UnsupportedMessagePartError(MessageModelError):
    """Object that is not a message part handed to a part operation."""


class UnsupportedTagPairError(MessageModelError):
    """Tag-pair kind without a placeholder naming scheme.

    Hard stop: a new tag-pair kind needs an explicit naming decision
    before it ships.
    """


class TagPairOwnershipError(MessageModelError):
    """Tag-pair ref claimed by a second tag pair."""


class PlaceholdersMapError(MessageModelError):
    """Placeholders map violates its invariant against the parts tree.

    Raised for unnamed placeholders, duplicate names, and map entries that
    are missing from, or not reachable in, the parts tree.
    """
