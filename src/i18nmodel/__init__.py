"""i18nmodel - Localizable message model for i18n extraction pipelines.

Models extracted messages (text interleaved with placeholders and markup tag
pairs) and derives two artifacts from them: a long content fingerprint for
stable, content-addressed message ids, and deterministic, human-readable
placeholder names.

Public API:
    TextPart, NgExpr, HtmlTagPair - Message part kinds
    Message - Aggregate root handed to serializers
    StableTypeName - Persisted part type names
    get_stable_type_name - Stable type name of a part
    compose_long_fingerprint - Fingerprint of a parts sequence
    resolve_name_hint - Name hint of a placeholder
    assign_placeholder_names - Naming pass over a parts tree
    build_message - Naming pass plus validated Message assembly
    Counter, LoadingCache - Disambiguation counter and hint cache

Exceptions:
    MessageModelError - Base exception class
    StableTypeNameError - Registry misuse
    UnimplementedFingerprintError - Abstract fingerprint invoked
    UnsupportedTagPairError - Tag-pair kind without a naming scheme

Submodules:
    i18nmodel.model - Part kinds, registry, fingerprints, Message
    i18nmodel.naming - Hint resolution and name assignment
    i18nmodel.core - Counter, LoadingCache, DepthGuard
    i18nmodel.diagnostics - Error types and diagnostic formatting
"""

from .core import Counter, LoadingCache
from .diagnostics import (
    MessageModelError,
    StableTypeNameError,
    UnimplementedFingerprintError,
    UnsupportedTagPairError,
)
from .enums import StableTypeName
from .model import (
    HtmlTagPair,
    Message,
    NgExpr,
    TextPart,
    compose_long_fingerprint,
    get_stable_type_name,
)
from .naming import assign_placeholder_names, build_message, resolve_name_hint

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nmodel")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Counter",
    "HtmlTagPair",
    "LoadingCache",
    "Message",
    "MessageModelError",
    "NgExpr",
    "StableTypeName",
    "StableTypeNameError",
    "TextPart",
    "UnimplementedFingerprintError",
    "UnsupportedTagPairError",
    "__version__",
    "assign_placeholder_names",
    "build_message",
    "compose_long_fingerprint",
    "get_stable_type_name",
    "resolve_name_hint",
]
