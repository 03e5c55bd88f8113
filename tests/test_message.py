"""Tests for model/message.py: Message aggregate and placeholder traversal."""

from __future__ import annotations

import pytest
from hypothesis import given

from i18nmodel.core.depth_guard import DepthLimitExceededError
from i18nmodel.diagnostics import (
    DiagnosticCode,
    PlaceholdersMapError,
    UnsupportedMessagePartError,
)
from i18nmodel.model.message import Message, iter_placeholders
from i18nmodel.model.parts import HtmlTagPair, MessagePart, NgExpr, TextPart
from i18nmodel.naming import assign_placeholder_names
from tests.strategies import parts_lists


def _bold(*children: MessagePart) -> HtmlTagPair:
    return HtmlTagPair.new_for_parsing("b", "<b>", "</b>", list(children), None, "HtmlTagPair:b")


def _nested(depth: int) -> HtmlTagPair:
    pair = _bold(TextPart("core"))
    for _ in range(depth - 1):
        pair = _bold(pair)
    return pair


class TestIterPlaceholders:
    """Document-order traversal of placeholders."""

    def test_document_order(self) -> None:
        """Begin ref, children, end ref; text skipped."""
        inner = NgExpr("user")
        pair = _bold(TextPart("Hi "), inner)
        outer = NgExpr("count")

        found = list(iter_placeholders([TextPart("x"), pair, outer]))

        assert found == [pair.begin_placeholder_ref, inner, pair.end_placeholder_ref, outer]

    def test_nested_pairs(self) -> None:
        """Nested pairs contribute their refs in nesting order."""
        inner = _bold(TextPart("x"))
        outer = _bold(inner)

        found = list(iter_placeholders([outer]))

        assert found == [
            outer.begin_placeholder_ref,
            inner.begin_placeholder_ref,
            inner.end_placeholder_ref,
            outer.end_placeholder_ref,
        ]

    def test_depth_limit(self) -> None:
        """Nesting beyond max_depth raises."""
        with pytest.raises(DepthLimitExceededError):
            list(iter_placeholders([_nested(5)], max_depth=3))

    def test_depth_within_limit(self) -> None:
        """Nesting up to max_depth is walked."""
        assert len(list(iter_placeholders([_nested(3)], max_depth=3))) == 6

    def test_non_part_rejected(self) -> None:
        """Unknown objects in parts are rejected."""
        with pytest.raises(UnsupportedMessagePartError):
            list(iter_placeholders([42]))  # type: ignore[list-item]


def _named_message(parts: list[MessagePart]) -> Message:
    placeholders_map = assign_placeholder_names(parts)
    return Message(
        id="greeting",
        meaning="greeting on the home page",
        comment="Shown after sign-in",
        parts=parts,
        placeholders_map=placeholders_map,
    )


class TestMessage:
    """Message aggregate behavior."""

    def test_fields(self) -> None:
        """Message exposes its fields."""
        message = _named_message([TextPart("Hi "), NgExpr("name")])

        assert message.id == "greeting"
        assert message.meaning == "greeting on the home page"
        assert message.comment == "Shown after sign-in"

    def test_fingerprint_composes_parts(self) -> None:
        """Message fingerprint is the composition over its parts."""
        message = _named_message([TextPart("Hi "), NgExpr("name"), _bold(TextPart("!"))])

        assert message.to_long_fingerprint() == "Hi NgExprnameHtmlTagPair:b"

    def test_map_values_alias_parts(self) -> None:
        """Map values are the objects reachable from parts."""
        expr = NgExpr("name")
        message = _named_message([TextPart("Hi "), expr])

        assert message.placeholders_map["EXPRESSION"] is expr
        expr.comment = "user display name"
        assert message.placeholders_map["EXPRESSION"].comment == "user display name"

    def test_rename_visible_through_both_paths(self) -> None:
        """A name written via the map is visible via parts."""
        expr = NgExpr("name")
        message = _named_message([expr])

        message.placeholders_map["EXPRESSION"].name = "USER_NAME"
        assert expr.name == "USER_NAME"

    def test_fields_not_reassignable(self) -> None:
        """Message fields are frozen after assembly."""
        message = _named_message([TextPart("x")])
        with pytest.raises(AttributeError):
            message.parts = []  # type: ignore[misc]


class TestMessageValidate:
    """Placeholders-map invariant checks."""

    def test_valid_message_passes(self) -> None:
        """A freshly named message validates."""
        _named_message([NgExpr("a"), _bold(NgExpr("b")), NgExpr("c")]).validate()

    def test_unnamed_placeholder(self) -> None:
        """An unresolved name is reported."""
        message = Message(None, None, None, [NgExpr("a")], {})

        with pytest.raises(PlaceholdersMapError) as exc_info:
            message.validate()

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PLACEHOLDER_NAME_MISSING

    def test_duplicate_names(self) -> None:
        """Two placeholders sharing a name are reported."""
        first = NgExpr("a", name="X")
        second = NgExpr("b", name="X")
        message = Message(None, None, None, [first, second], {"X": first})

        with pytest.raises(PlaceholdersMapError) as exc_info:
            message.validate()

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PLACEHOLDER_NAME_DUPLICATE

    def test_missing_map_entry(self) -> None:
        """A named placeholder absent from the map is reported."""
        message = Message(None, None, None, [NgExpr("a", name="X")], {})

        with pytest.raises(PlaceholdersMapError, match="is missing"):
            message.validate()

    def test_map_entry_is_a_copy(self) -> None:
        """A map entry that is not the object in parts is reported."""
        expr = NgExpr("a", name="X")
        message = Message(None, None, None, [expr], {"X": NgExpr("a", name="X")})

        with pytest.raises(PlaceholdersMapError, match="refers to a different placeholder"):
            message.validate()

    def test_unreachable_map_entry(self) -> None:
        """A map entry not reachable from parts is reported."""
        expr = NgExpr("a", name="X")
        message = Message(None, None, None, [expr], {"X": expr, "Y": NgExpr("b", name="Y")})

        with pytest.raises(PlaceholdersMapError, match="'Y' is not reachable"):
            message.validate()

    @given(parts=parts_lists)
    def test_named_messages_always_validate(self, parts: list[MessagePart]) -> None:
        """PROPERTY: the naming pass always produces a valid map."""
        message = _named_message(parts)
        message.validate()
        assert len(message.placeholders_map) == len(list(message.iter_placeholders()))
