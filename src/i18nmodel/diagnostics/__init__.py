"""Diagnostic system for i18nmodel errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    MessageModelError,
    PlaceholdersMapError,
    StableTypeNameError,
    TagPairOwnershipError,
    UnimplementedFingerprintError,
    UnsupportedMessagePartError,
    UnsupportedTagPairError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "MessageModelError",
    "OutputFormat",
    "PlaceholdersMapError",
    "StableTypeNameError",
    "TagPairOwnershipError",
    "UnimplementedFingerprintError",
    "UnsupportedMessagePartError",
    "UnsupportedTagPairError",
]
