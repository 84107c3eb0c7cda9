"""Factory for creating router instances.

Provides a registry-based factory pattern for instantiating
routing strategies by name.
"""

from typing import Dict, List, Type

from expert_router.strategies.base import Router


class RouterFactory:
    """Factory for creating router instances.

    Implements a registry pattern where routers can be registered
    by name and later instantiated via the create method.

    Example:
        >>> from expert_router.strategies.factory import RouterFactory
        >>> RouterFactory.default()
        >>> router = RouterFactory.create("deterministic")
    """

    _registry: Dict[str, Type[Router]] = {}

    @classmethod
    def register(cls, name: str, router_class: Type[Router]) -> None:
        """Register a router class.

        Args:
            name: Unique identifier for the router.
            router_class: Router subclass to register.

        Raises:
            TypeError: If router_class is not a Router subclass.
            ValueError: If name is already registered.
        """
        if not isinstance(router_class, type) or not issubclass(router_class, Router):
            raise TypeError(f"{router_class!r} must be a Router subclass")
        if name in cls._registry:
            raise ValueError(f"Router '{name}' is already registered")
        cls._registry[name] = router_class

    @classmethod
    def create(cls, name: str) -> Router:
        """Create a router instance by name.

        Args:
            name: Identifier of the router to create.

        Returns:
            New instance of the requested router.

        Raises:
            KeyError: If no router is registered under the given name.
        """
        if name not in cls._registry:
            available = list(cls._registry.keys())
            raise KeyError(f"Router '{name}' not found. Available: {available}")
        return cls._registry[name]()

    @classmethod
    def list_strategies(cls) -> List[str]:
        """List all registered router names."""
        return list(cls._registry.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registered routers."""
        cls._registry.clear()

    @classmethod
    def default(cls) -> None:
        """Make sure the built-in routers are registered."""
        from expert_router.strategies.deterministic import DeterministicRouter

        if DeterministicRouter.name not in cls._registry:
            cls.register(DeterministicRouter.name, DeterministicRouter)
