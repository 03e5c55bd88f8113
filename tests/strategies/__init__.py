"""Hypothesis strategies for i18nmodel property-based testing.

Usage:
    from tests.strategies import message_parts, parts_lists
"""

from .parts import (
    HTML_TAGS,
    expression_texts,
    html_tag_pairs,
    message_parts,
    ng_exprs,
    parts_lists,
    text_parts,
)

__all__ = [
    "HTML_TAGS",
    "expression_texts",
    "html_tag_pairs",
    "message_parts",
    "ng_exprs",
    "parts_lists",
    "text_parts",
]
