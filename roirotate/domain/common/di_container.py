# roirotate/domain/common/di_container.py

"""
Small dependency injection container.

Services are registered against their interface type, either as a ready
instance or as a factory called on every resolve.
"""
from typing import Dict, Any, Type, TypeVar, Callable, Set

T = TypeVar('T')


class DIContainer:
    """Maps interface types to instances or factories."""

    def __init__(self):
        self._instance_registrations: Dict[type, Any] = {}
        self._factory_registrations: Dict[type, Callable[[], Any]] = {}
        self._resolving: Set[type] = set()  # circular dependency guard

    def register_instance(self, base_type: Type[T], instance: T) -> None:
        """Return `instance` whenever `base_type` is requested."""
        self._instance_registrations[base_type] = instance

    def register_factory(self, base_type: Type[T], factory: Callable[[], T]) -> None:
        """Call `factory` whenever `base_type` is requested."""
        self._factory_registrations[base_type] = factory

    def is_registered(self, base_type: type) -> bool:
        return base_type in self._instance_registrations or base_type in self._factory_registrations

    def resolve(self, base_type: Type[T]) -> T:
        """
        Resolve a type to its registered instance or a new factory instance.

        Raises:
            ValueError: If the type is not registered or resolution is circular
        """
        if base_type in self._resolving:
            raise ValueError(f"Circular dependency detected while resolving {base_type.__name__}")

        if base_type in self._instance_registrations:
            return self._instance_registrations[base_type]

        if base_type in self._factory_registrations:
            self._resolving.add(base_type)
            try:
                return self._factory_registrations[base_type]()
            finally:
                self._resolving.remove(base_type)

        raise ValueError(f"No registration found for {base_type.__name__}")
