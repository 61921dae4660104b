"""
Environment - ambient state lookup for descendant views.

A window (or any widget) that owns an Environment makes its state slices
discoverable by every widget below it. Views look slices up by type with
BaseView.environment_object() instead of receiving them through each
intermediate constructor.
"""

import logging
from typing import Optional, Type, TypeVar

from mvvm_counter.core.di.container import DIContainer

log = logging.getLogger("CounterLogger")

T = TypeVar("T")


class Environment:
    """
    Scoped registry keyed by state-slice type.

    Backed by a child scope of the application container, so anything the
    environment does not provide itself falls back to application-level
    registrations.

    Example:
        env = Environment(container)
        env.provide(vm.count_state)

        state = env.get(CountState)
    """

    def __init__(self, container: Optional[DIContainer] = None):
        self._scope = container.create_scope() if container else DIContainer()

    def provide(self, instance: T, as_type: Optional[Type[T]] = None) -> "Environment":
        """
        Register an existing object under its type (or as_type).

        Returns:
            Self for method chaining
        """
        key = as_type or type(instance)
        self._scope.register_singleton(key, instance=instance)
        log.debug(f"Environment provides {key.__name__}")
        return self

    def get(self, slice_type: Type[T]) -> T:
        """
        Look up the object registered for slice_type.

        Raises:
            ServiceNotRegisteredError: If nothing provides slice_type
        """
        return self._scope.resolve(slice_type)
