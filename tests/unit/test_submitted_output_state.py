"""Unit tests for SubmittedOutputState."""

import pytest


class TestSubmittedOutputState:
    """Test the committed output slice."""

    def test_empty_until_first_submit(self, input_output):
        assert input_output.submitted_text == ""

    @pytest.mark.parametrize("text", ["hello", "x" * 1000, "tab\there", "日本語"])
    def test_submit_sets_exact_text(self, input_output, text):
        input_output.submit(text)
        assert input_output.submitted_text == text

    def test_submit_overwrites_previous_value(self, input_output):
        input_output.submit("first")
        input_output.submit("second")
        assert input_output.submitted_text == "second"

    def test_submit_empty_is_valid(self, input_output):
        input_output.submit("something")
        input_output.submit("")
        assert input_output.submitted_text == ""

    def test_submit_notifies(self, input_output, recorder):
        slot = recorder()
        input_output.submitted_text_changed.connect(slot)

        input_output.submit("hello")

        assert slot.values == ["hello"]
