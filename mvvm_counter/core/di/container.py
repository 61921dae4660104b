"""
Lightweight Dependency Injection Container.

Holds one instance per registered type for the whole session. Child
scopes layer their own registrations over a parent and fall back to it
for everything else.
"""

from __future__ import annotations
from typing import TypeVar, Type, Dict, Callable, Optional, Any
import threading
import logging

from mvvm_counter.core.exceptions import ServiceNotRegisteredError

log = logging.getLogger("CounterLogger")

T = TypeVar("T")

Factory = Callable[["DIContainer"], Any]


class DIContainer:
    """
    Singleton registry with parent fallback.

    Example:
        container = DIContainer()
        container.register_singleton(AppConfig, instance=config)
        container.register_singleton(
            CounterViewModel,
            factory=lambda c: CounterViewModel(c.resolve(CounterConfig)),
        )

        vm = container.resolve(CounterViewModel)
        assert vm is container.resolve(CounterViewModel)
    """

    def __init__(self, parent: Optional[DIContainer] = None):
        self._factories: Dict[Type, Factory] = {}
        self._instances: Dict[Type, Any] = {}
        self._provided: Dict[Type, Any] = {}
        self._parent = parent
        self._lock = threading.RLock()

    def register_singleton(
        self,
        service_type: Type[T],
        factory: Optional[Callable[[DIContainer], T]] = None,
        instance: Optional[T] = None,
    ) -> DIContainer:
        """
        Register a service created at most once.

        Args:
            service_type: The lookup type
            factory: Builds the instance on first resolve; defaults to
                calling service_type with no arguments
            instance: Pre-created instance, owned by the caller

        Returns:
            Self for method chaining
        """
        with self._lock:
            self._instances.pop(service_type, None)
            self._provided.pop(service_type, None)
            self._factories.pop(service_type, None)
            if instance is not None:
                self._provided[service_type] = instance
            else:
                self._factories[service_type] = factory or (lambda c: service_type())
        return self

    def resolve(self, service_type: Type[T]) -> T:
        """
        Resolve a service by its type.

        Raises:
            ServiceNotRegisteredError: If neither this container nor a parent
                knows the type
        """
        with self._lock:
            if service_type in self._provided:
                return self._provided[service_type]
            if service_type in self._instances:
                return self._instances[service_type]

            factory = self._factories.get(service_type)
            if factory is None:
                if self._parent is not None:
                    return self._parent.resolve(service_type)
                raise ServiceNotRegisteredError(service_type)

            log.debug(f"Creating instance of {service_type.__name__}")
            instance = factory(self)
            self._instances[service_type] = instance
            return instance

    def create_scope(self) -> DIContainer:
        """New child container falling back to this one."""
        return DIContainer(parent=self)

    def dispose_all(self) -> None:
        """
        Dispose every instance this container created.

        Pre-created instances belong to whoever registered them and are
        left alone.
        """
        with self._lock:
            instances = list(self._instances.values())
            self._instances.clear()
        for instance in instances:
            if hasattr(instance, "dispose"):
                instance.dispose()
            elif hasattr(instance, "close"):
                instance.close()
