"""Message part model: kinds, stable type names, fingerprints, messages.

Python 3.13+.
"""

from .fingerprint import (
    DEFAULT_FINGERPRINT_POLICY,
    FingerprintPolicy,
    compose_long_fingerprint,
    long_fingerprint,
)
from .message import Message, PlaceholdersMap, iter_placeholders
from .parts import (
    HtmlTagPair,
    MessagePart,
    MessagePartBase,
    NgExpr,
    Placeholder,
    PlaceholderBase,
    TagPair,
    TagPairBeginRef,
    TagPairEndRef,
    TagPairRefBase,
    TextPart,
)
from .registry import (
    DEFAULT_REGISTRY,
    StableTypeRegistry,
    get_stable_type_name,
    register_stable_type_name,
    stable_type,
)

__all__ = [
    "DEFAULT_FINGERPRINT_POLICY",
    "DEFAULT_REGISTRY",
    "FingerprintPolicy",
    "HtmlTagPair",
    "Message",
    "MessagePart",
    "MessagePartBase",
    "NgExpr",
    "Placeholder",
    "PlaceholderBase",
    "PlaceholdersMap",
    "StableTypeRegistry",
    "TagPair",
    "TagPairBeginRef",
    "TagPairEndRef",
    "TagPairRefBase",
    "TextPart",
    "compose_long_fingerprint",
    "get_stable_type_name",
    "iter_placeholders",
    "long_fingerprint",
    "register_stable_type_name",
    "stable_type",
]
