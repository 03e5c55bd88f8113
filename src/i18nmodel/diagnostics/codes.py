"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Stable type registry misuse
        2000-2999: Fingerprint computation errors
        3000-3999: Placeholder naming errors
        4000-4999: Message structure errors
    """

    # Registry errors (1000-1999)
    STABLE_TYPE_NAME_REUSED = 1001
    KIND_ALREADY_REGISTERED = 1002
    KIND_NOT_REGISTERED = 1003
    REGISTRY_FROZEN = 1004
    STABLE_TYPE_NAME_UNKNOWN = 1005

    # Fingerprint errors (2000-2999)
    FINGERPRINT_UNIMPLEMENTED = 2001
    MESSAGE_PART_UNSUPPORTED = 2002

    # Naming errors (3000-3999)
    TAG_PAIR_KIND_UNSUPPORTED = 3001

    # Structure errors (4000-4999)
    TAG_PAIR_REF_SHARED = 4001
    PLACEHOLDER_NAME_MISSING = 4002
    PLACEHOLDER_NAME_DUPLICATE = 4003
    PLACEHOLDERS_MAP_MISMATCH = 4004
    MAX_DEPTH_EXCEEDED = 4005
    TAG_PAIR_REF_ORPHANED = 4006


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Every error in this package is a
    programming error, so the diagnostic names the offending kind or
    placeholder and suggests the fix.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        subject: Class name, type name or placeholder name the error is about
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    subject: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[KIND_NOT_REGISTERED]: No stable type name registered for 'Foo'
              = subject: Foo
              = help: Register the kind once at module import time

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
