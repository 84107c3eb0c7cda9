"""Expert routing strategies package.

This module provides the router interface, the deterministic router and
the factory used to select a router by name.
"""

from expert_router.strategies.base import Router
from expert_router.strategies.deterministic import DeterministicRouter
from expert_router.strategies.factory import RouterFactory

__all__ = ["Router", "DeterministicRouter", "RouterFactory"]
