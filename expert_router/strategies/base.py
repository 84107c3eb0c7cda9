"""Abstract base class for expert routers.

Defines the interface that all routing strategies must implement.
"""

from abc import ABC, abstractmethod

from expert_router.core.decision import RoutingDecision
from expert_router.core.tier import Tier


class Router(ABC):
    """Abstract base class for expert routing strategies.

    A router decides which experts of a pool are activated for a given
    tier and inference step. Callers depend only on this interface, so a
    different strategy can be swapped in without changing them.

    Attributes:
        name: Identifier the strategy is registered under.
    """

    name: str = "BaseRouter"

    @abstractmethod
    def route(self, tier: Tier, step: int, pool_size: int) -> RoutingDecision:
        """Select the experts to activate for one step.

        Args:
            tier: Service tier, which fixes the activation budget.
            step: Non-negative inference step index.
            pool_size: Total number of experts loaded in the runtime.

        Returns:
            RoutingDecision with exactly budget_for(tier) distinct indices,
            each in [0, pool_size).

        Raises:
            InvalidPoolSizeError: If pool_size is not positive.
            InsufficientPoolError: If the tier's budget exceeds pool_size.
            InvalidStepIndexError: If step is negative.
        """
        ...
