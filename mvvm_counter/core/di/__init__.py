"""
Dependency Injection module.
"""

from mvvm_counter.core.di.container import DIContainer

__all__ = ["DIContainer"]
