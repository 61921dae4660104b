"""
Windows for the presentation layer.
"""

from mvvm_counter.presentation.windows.root_window import RootWindow

__all__ = ["RootWindow"]
