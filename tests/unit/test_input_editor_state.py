"""Unit tests for InputEditorState."""

import pytest


class TestInputEditorState:
    """Test the live input slice."""

    def test_starts_empty(self, input_editor):
        assert input_editor.user_input == ""

    @pytest.mark.parametrize(
        "text",
        [
            "hello",
            "",
            "   padded   ",
            "line\nbreak\ttab",
            "émoji 🎉 ünïcödé",
            "<b>&amp;</b> 'quotes' \"double\" \\backslash",
        ],
    )
    def test_stores_text_verbatim(self, input_editor, text):
        input_editor.user_input = "seed"
        input_editor.user_input = text
        assert input_editor.user_input == text

    def test_every_keystroke_notifies(self, input_editor, recorder):
        slot = recorder()
        input_editor.user_input_changed.connect(slot)

        for text in ["h", "he", "hel", "hell", "hello"]:
            input_editor.user_input = text

        assert slot.values == ["h", "he", "hel", "hell", "hello"]

    def test_same_value_does_not_notify(self, input_editor, recorder):
        input_editor.user_input = "same"
        slot = recorder()
        input_editor.user_input_changed.connect(slot)

        input_editor.user_input = "same"

        assert slot.count == 0
