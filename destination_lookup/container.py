"""Dependency injection container.

Binds the store, cache and navigator ports to adapters chosen from
configuration, and builds one SearchCoordinator per session on top of
them. Adapters are instantiated on first resolve.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TypeVar

from .config import AppConfig, get_config

T = TypeVar("T")


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        coordinator = container.resolve(SearchCoordinator)

        # Testing
        container = Container()
        container.register(DestinationStorePort, lambda: FakeStore())
        store = container.resolve(DestinationStorePort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)

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
        self._factories[port_type] = factory
        if singleton:
            self._singleton_types.add(port_type)
        else:
            self._singleton_types.discard(port_type)
        self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        if port_type not in self._factories:
            raise KeyError(f"Type not registered: {port_type}")

        if port_type in self._singleton_types:
            if port_type not in self._singletons:
                self._singletons[port_type] = self._factories[port_type]()
            return self._singletons[port_type]

        return self._factories[port_type]()

    def clear_all(self) -> None:
        """Clear all registrations and singletons."""
        self._factories.clear()
        self._singletons.clear()
        self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default bindings.

        The store and cache backends are chosen from configuration.
        SearchCoordinator is registered as a non-singleton: every resolve
        starts a new session with its own cache.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.

        Raises:
            ConfigurationError: If a backend name is unknown.
        """
        from .adapters.cache import InMemoryResultCache, NullResultCache
        from .adapters.navigation import AddressBar
        from .adapters.store import HttpDestinationStore, InMemoryDestinationStore
        from .domain.errors import ConfigurationError
        from .ports.cache import ResultCachePort
        from .ports.navigation import NavigatorPort
        from .ports.store import DestinationStorePort
        from .services import SearchCoordinator

        config = config or get_config()
        container = cls(config=config)

        # Store based on config
        def create_store() -> DestinationStorePort:
            backend = config.store.backend
            if backend == "memory":
                return InMemoryDestinationStore(config.store)
            if backend == "http":
                return HttpDestinationStore(config.store)
            raise ConfigurationError(
                f"Unknown store backend: {backend}",
                setting_name="store.backend",
                expected_type="memory | http",
            )

        container.register(DestinationStorePort, create_store)

        # Cache, one per session
        def create_cache() -> ResultCachePort:
            backend = config.search.cache_backend
            if backend == "memory":
                return InMemoryResultCache(name="search")
            if backend == "null":
                return NullResultCache()
            raise ConfigurationError(
                f"Unknown cache backend: {backend}",
                setting_name="search.cache_backend",
                expected_type="memory | null",
            )

        container.register(ResultCachePort, create_cache, singleton=False)

        container.register(
            NavigatorPort,
            lambda: AddressBar(url=config.navigation.base_url),
        )

        def create_coordinator() -> SearchCoordinator:
            return SearchCoordinator(
                store=container.resolve(DestinationStorePort),
                cache=container.resolve(ResultCachePort),
                navigator=container.resolve(NavigatorPort),
                debounce_ms=config.search.debounce_ms,
                proximity_limit=config.search.proximity_limit,
                earth_radius_km=config.search.earth_radius_km,
                apply_stale_responses=config.search.apply_stale_responses,
            )

        container.register(SearchCoordinator, create_coordinator, singleton=False)

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
