"""Pytest fixtures for expert router tests."""

import pytest
from expert_router.core.config import RouterConfig
from expert_router.core.config_loader import ReplayConfig
from expert_router.strategies.deterministic import DeterministicRouter
from expert_router.strategies.factory import RouterFactory


@pytest.fixture
def router():
    """Create a deterministic router."""
    return DeterministicRouter()


@pytest.fixture
def router_factory():
    """Reset the factory registry to the built-in routers."""
    RouterFactory.clear()
    RouterFactory.default()
    yield RouterFactory
    RouterFactory.clear()
    RouterFactory.default()


@pytest.fixture
def router_config():
    """Create router config for an 8-expert pool."""
    return RouterConfig(pool_size=8)


@pytest.fixture
def router_config_small():
    """Create router config too small for the larger tiers."""
    return RouterConfig(pool_size=6)


@pytest.fixture
def replay_config():
    """Create replay config over a 16-expert pool."""
    return ReplayConfig(
        pool_size=16,
        num_steps=8,
        tiers=["nano", "standard", "pro", "max"],
    )


@pytest.fixture
def replay_config_small():
    """Create replay config whose pool cannot serve Max."""
    return ReplayConfig(pool_size=10, num_steps=5)
