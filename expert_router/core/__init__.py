"""Core module for the expert router.

Provides the routing data model and the replay tooling built on it:
- Tier / budget_for: service tiers and their activation budgets
- RoutingDecision / ExpertId: routing output types
- RoutingError and subclasses: input-contract violations
- RouterConfig / ReplayConfig: configuration
- ReplayRunner / ResultsAggregator: trace replay and load summaries
"""

from expert_router.core.tier import TIER_BUDGETS, Tier, budget_for
from expert_router.core.errors import (
    InsufficientPoolError,
    InvalidPoolSizeError,
    InvalidStepIndexError,
    RoutingError,
)
from expert_router.core.decision import ExpertId, RoutingDecision
from expert_router.core.config import RouterConfig
from expert_router.core.config_loader import ReplayConfig, load_config, save_config
from expert_router.core.results import ReplayResult, ResultsAggregator
from expert_router.core.runner import ReplayRunner, create_runner

__all__ = [
    "TIER_BUDGETS",
    "Tier",
    "budget_for",
    "RoutingError",
    "InsufficientPoolError",
    "InvalidPoolSizeError",
    "InvalidStepIndexError",
    "ExpertId",
    "RoutingDecision",
    "RouterConfig",
    "ReplayConfig",
    "load_config",
    "save_config",
    "ReplayResult",
    "ResultsAggregator",
    "ReplayRunner",
    "create_runner",
]
