"""Tests for TextController and FocusNode."""

from __future__ import annotations

import pytest

from formguard.lib.errors import SourceDisposedError
from formguard.models import FocusNode, TextController


class TestTextController:
    """Tests for TextController."""

    def test_notifies_on_change(self) -> None:
        """Assigning new text notifies listeners."""
        controller = TextController()
        calls: list[str] = []
        controller.add_listener(lambda: calls.append(controller.text))

        controller.text = "a"

        assert calls == ["a"]

    def test_same_text_is_silent(self) -> None:
        """Assigning identical text does not notify."""
        controller = TextController("a")
        calls: list[int] = []
        controller.add_listener(lambda: calls.append(1))

        controller.text = "a"

        assert calls == []

    def test_clear(self) -> None:
        """clear() empties the text."""
        controller = TextController("abc")
        controller.clear()
        assert controller.text == ""

    def test_duplicate_listener_added_once(self) -> None:
        """The same listener is only subscribed once."""
        controller = TextController()
        calls: list[int] = []

        def listener() -> None:
            calls.append(1)

        controller.add_listener(listener)
        controller.add_listener(listener)
        controller.text = "x"

        assert calls == [1]

    def test_remove_unknown_listener_raises(self) -> None:
        """Removing a listener that was never added fails."""
        with pytest.raises(ValueError):
            TextController().remove_listener(lambda: None)

    def test_listener_may_unsubscribe_itself(self) -> None:
        """Listeners can remove themselves during notification."""
        controller = TextController()
        calls: list[str] = []

        def once() -> None:
            calls.append("once")
            controller.remove_listener(once)

        controller.add_listener(once)
        controller.add_listener(lambda: calls.append("always"))

        controller.text = "a"
        controller.text = "b"

        assert calls == ["once", "always", "always"]

    def test_disposed_controller_rejects_use(self) -> None:
        """A disposed controller cannot be written or subscribed."""
        controller = TextController()
        controller.dispose()

        with pytest.raises(SourceDisposedError):
            controller.text = "x"
        with pytest.raises(SourceDisposedError):
            controller.add_listener(lambda: None)


class TestFocusNode:
    """Tests for FocusNode."""

    def test_transitions_notify(self) -> None:
        """Gaining and losing focus each notify once."""
        node = FocusNode()
        states: list[bool] = []
        node.add_listener(lambda: states.append(node.has_focus))

        node.request_focus()
        node.request_focus()
        node.unfocus()
        node.unfocus()

        assert states == [True, False]

    def test_disposed_node_rejects_focus(self) -> None:
        """A disposed node cannot change focus."""
        node = FocusNode()
        node.dispose()

        assert node.is_disposed
        with pytest.raises(SourceDisposedError):
            node.request_focus()
