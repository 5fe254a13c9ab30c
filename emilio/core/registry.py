# emilio/core/registry.py
"""
Service registry for Emilio CLI.

This registry provides centralized access to the long-lived components
(Gemini client, generation session, preview renderer). It supports lazy
initialization through factories so importing a module never forces the
Gemini SDK to be configured.
"""
from typing import Dict, Any, Type, Optional, Callable, TypeVar, List
import threading

from emilio.utils.logging import get_logger

T = TypeVar('T')


class ServiceRegistry:
    """
    Service registry with lazy initialization support.

    This registry implements:
    - Lazy initialization via get_or_create
    - Factory functions for complex initialization
    - Instance tracking for debugging
    """

    _instance = None
    _lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> 'ServiceRegistry':
        """Get the singleton instance of the registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = ServiceRegistry()
        return cls._instance

    def __init__(self):
        self._services: Dict[str, Any] = {}
        self._factories: Dict[str, Callable[[], Any]] = {}
        self._service_types: Dict[str, Type] = {}
        self._initialization_order: List[str] = []
        self._logger = get_logger(__name__)

    def register(self, name: str, service: Any) -> Any:
        """
        Register a service with the registry.

        Args:
            name: Unique identifier for the service
            service: The service instance to register

        Returns:
            The registered service (for method chaining)
        """
        with self._lock:
            self._services[name] = service
            self._service_types[name] = type(service)
            if name not in self._initialization_order:
                self._initialization_order.append(name)

            self._logger.debug(f"Registered service: {name} ({type(service).__name__})")
            return service

    def register_factory(self, name: str, factory: Callable[[], Any]) -> None:
        """
        Register a factory function for lazy initialization.

        Args:
            name: Unique identifier for the service
            factory: Callable that returns the service instance
        """
        with self._lock:
            self._factories[name] = factory
            self._logger.debug(f"Registered factory for: {name}")

    def get(self, name: str) -> Optional[Any]:
        """
        Get a service from the registry, creating it from its factory if needed.

        Args:
            name: The name of the service to retrieve

        Returns:
            The service instance or None if not found
        """
        if name in self._services:
            return self._services[name]

        if name in self._factories:
            with self._lock:
                if name in self._services:
                    return self._services[name]

                self._logger.debug(f"Creating service via factory: {name}")
                service = self._factories[name]()
                return self.register(name, service)

        return None

    def get_or_create(self, name: str, cls: Type[T], *args, factory: Optional[Callable[[], T]] = None, **kwargs) -> T:
        """
        Get a service or create it if it doesn't exist.

        Args:
            name: Service name
            cls: Class to instantiate if service doesn't exist
            factory: Optional callable used instead of cls(*args, **kwargs)
            *args, **kwargs: Arguments to pass to the class constructor

        Returns:
            The existing or newly created service
        """
        service = self.get(name)
        if service is not None:
            if not isinstance(service, cls):
                self._logger.warning(
                    f"Type mismatch for service '{name}': expected {cls.__name__}, "
                    f"got {type(service).__name__}"
                )
            return service

        with self._lock:
            if name in self._services:
                return self._services[name]

            self._logger.debug(f"Creating service: {name} ({cls.__name__})")
            service = factory() if factory is not None else cls(*args, **kwargs)
            return self.register(name, service)

    def unregister(self, name: str) -> None:
        """Remove a service (and its factory) from the registry."""
        with self._lock:
            self._services.pop(name, None)
            self._factories.pop(name, None)
            self._service_types.pop(name, None)
            if name in self._initialization_order:
                self._initialization_order.remove(name)

    def clear(self) -> None:
        """Clear all registered services."""
        with self._lock:
            self._logger.debug("Clearing service registry")
            self._services.clear()
            self._factories.clear()
            self._service_types.clear()
            self._initialization_order.clear()

    def list_services(self) -> Dict[str, Type]:
        """Get a dictionary of all registered services and their types."""
        with self._lock:
            return self._service_types.copy()

    def get_initialization_order(self) -> List[str]:
        """Get the order in which services were initialized."""
        with self._lock:
            return self._initialization_order.copy()


# Create global registry instance
registry = ServiceRegistry.get_instance()
