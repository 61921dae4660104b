"""
Views for the presentation layer.
"""

from mvvm_counter.presentation.views.counter_view import (
    CounterView,
    CountSection,
    InputSection,
    SubmittedTextView,
)

__all__ = [
    "CounterView",
    "CountSection",
    "InputSection",
    "SubmittedTextView",
]
