"""Expert Router - deterministic expert selection for MoE inference.

This package decides which experts of a mixture-of-experts pool are
activated for each inference step, including:
- Tier / budget_for: per-tier activation budgets
- DeterministicRouter: rotating-window routing over the expert pool
- RoutingDecision: the experts selected for one step
"""

__version__ = "0.1.0"

from expert_router.core.decision import ExpertId, RoutingDecision
from expert_router.core.errors import (
    InsufficientPoolError,
    InvalidPoolSizeError,
    InvalidStepIndexError,
    RoutingError,
)
from expert_router.core.tier import Tier, budget_for
from expert_router.strategies.base import Router
from expert_router.strategies.deterministic import DeterministicRouter

__all__ = [
    "ExpertId",
    "RoutingDecision",
    "RoutingError",
    "InsufficientPoolError",
    "InvalidPoolSizeError",
    "InvalidStepIndexError",
    "Tier",
    "budget_for",
    "Router",
    "DeterministicRouter",
]
