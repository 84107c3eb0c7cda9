"""Routing errors.

All routing failures are input-contract violations raised straight to the
caller. There is no partial result: a call either returns a complete
decision or raises one of these.
"""

from expert_router.core.tier import Tier


class RoutingError(ValueError):
    """Base class for routing failures."""


class InvalidPoolSizeError(RoutingError):
    """The expert pool is empty (not initialized before routing)."""

    def __init__(self, pool_size: int) -> None:
        self.pool_size = pool_size
        super().__init__(f"pool_size must be positive, got {pool_size}")


class InsufficientPoolError(RoutingError):
    """The pool holds fewer experts than the tier's activation budget.

    Signals a deployment defect: the caller should refuse to serve the
    tier rather than degrade routing.
    """

    def __init__(self, tier: Tier, budget: int, pool_size: int) -> None:
        self.tier = tier
        self.budget = budget
        self.pool_size = pool_size
        super().__init__(
            f"tier '{tier.value}' needs {budget} experts "
            f"but the pool only has {pool_size}"
        )


class InvalidStepIndexError(RoutingError):
    """Step index is negative."""

    def __init__(self, step: int) -> None:
        self.step = step
        super().__init__(f"step must be non-negative, got {step}")
