"""Placeholder naming: name hints and unique name assignment.

Python 3.13+.
"""

from .config import NamingConfig
from .hints import (
    PlaceholderHintResolver,
    get_default_hint_resolver,
    resolve_name_hint,
    uppercase_tag_hint,
)
from .resolver import PlaceholderNamer, assign_placeholder_names, build_message

__all__ = [
    "NamingConfig",
    "PlaceholderHintResolver",
    "PlaceholderNamer",
    "assign_placeholder_names",
    "build_message",
    "get_default_hint_resolver",
    "resolve_name_hint",
    "uppercase_tag_hint",
]
