"""Dependency injection container.

Explicit registration and resolution of the store and the editor
service, with no external framework.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config
from .domain.errors import ConfigurationError


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        editor = container.resolve(TravelEditorService)

        # Testing
        container = Container()
        container.register(TravelStorePort, lambda: InMemoryTravelStore())
        store = container.resolve(TravelStorePort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Args:
            port_type: The type to resolve.

        Returns:
            An instance of the requested type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        """Check if a type is registered.

        Args:
            port_type: The type to check.

        Returns:
            True if the type is registered.
        """
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    def clear_all(self) -> None:
        """Clear all registrations and singletons.

        Call this to completely reset the container.
        """
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        This creates a fully configured container with all adapters
        registered and ready to use.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.store import InMemoryTravelStore, JsonFileTravelStore
        from .ports.store import TravelStorePort
        from .services import TravelEditorService

        config = config or get_config()
        container = cls(config=config)

        # Store based on config
        def create_store() -> TravelStorePort:
            backend = config.store.backend
            if backend == "memory":
                return InMemoryTravelStore(name="default")
            elif backend == "json":
                return JsonFileTravelStore(config.store)
            else:
                raise ConfigurationError(
                    f"Unknown store backend {backend!r}",
                    setting_name="store.backend",
                    expected_type="'memory' | 'json'",
                )

        container.register(TravelStorePort, create_store)

        # Main service
        def create_travel_editor() -> TravelEditorService:
            return TravelEditorService(
                store=container.resolve(TravelStorePort),
                config=config,
            )

        container.register(TravelEditorService, create_travel_editor)

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container.

    Returns:
        The default Container instance (creates one if needed).
    """
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
