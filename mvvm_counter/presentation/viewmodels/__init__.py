"""
ViewModels for the presentation layer.
"""

from mvvm_counter.presentation.viewmodels.counter_viewmodel import CounterViewModel

__all__ = ["CounterViewModel"]
