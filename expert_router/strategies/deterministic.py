"""Deterministic rotating-window router.

Each step activates a contiguous window of experts that starts at
(step * budget) mod pool_size and wraps around the end of the pool, so
consecutive steps walk the window across every expert.
"""

from typing import List

from expert_router.core.decision import RoutingDecision
from expert_router.core.errors import (
    InsufficientPoolError,
    InvalidPoolSizeError,
    InvalidStepIndexError,
)
from expert_router.core.tier import Tier, budget_for
from expert_router.strategies.base import Router


def _require_int(name: str, value: int) -> None:
    # bool is an int subclass but never a valid step or pool size
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


class DeterministicRouter(Router):
    """Stateless router that rotates a fixed-size window over the pool.

    The decision depends only on (tier, step, pool_size): no randomness,
    no floating point and no state carried between calls. Over
    ceil(pool_size / budget) consecutive steps every expert is activated
    at least once.
    """

    name: str = "deterministic"

    def route(self, tier: Tier, step: int, pool_size: int) -> RoutingDecision:
        """Select a circular window of experts for a step.

        Args:
            tier: Service tier, which fixes the activation budget.
            step: Non-negative inference step index.
            pool_size: Total number of experts loaded in the runtime.

        Returns:
            RoutingDecision whose indices run (start + i) mod pool_size
            for i in [0, budget), in that order.

        Raises:
            InvalidPoolSizeError: If pool_size is not positive.
            InsufficientPoolError: If the tier's budget exceeds pool_size.
            InvalidStepIndexError: If step is negative.
            TypeError: If step or pool_size is not an int.
        """
        _require_int("step", step)
        _require_int("pool_size", pool_size)

        budget = budget_for(tier)
        if pool_size <= 0:
            raise InvalidPoolSizeError(pool_size)
        if budget > pool_size:
            raise InsufficientPoolError(tier, budget, pool_size)
        if step < 0:
            raise InvalidStepIndexError(step)

        start = (step * budget) % pool_size
        indices: List[int] = [(start + i) % pool_size for i in range(budget)]

        return RoutingDecision(tier=tier, step=step, expert_indices=tuple(indices))
