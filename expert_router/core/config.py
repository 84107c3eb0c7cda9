"""Router configuration dataclass.

Describes the expert pool a router serves and which strategy to use.
"""

from dataclasses import dataclass
from typing import List

from expert_router.core.tier import Tier, budget_for


@dataclass
class RouterConfig:
    """Configuration for an expert router.

    Attributes:
        pool_size: Total number of experts loaded for the model.
        strategy: Name of the registered router to use.
    """

    pool_size: int
    strategy: str = "deterministic"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if isinstance(self.pool_size, bool) or not isinstance(self.pool_size, int):
            raise TypeError(
                f"pool_size must be an int, got {type(self.pool_size).__name__}"
            )
        if self.pool_size <= 0:
            raise ValueError("pool_size must be positive")
        if not self.strategy:
            raise ValueError("strategy must be a non-empty name")

    def supports(self, tier: Tier) -> bool:
        """Check whether the pool is large enough for a tier.

        Args:
            tier: Service tier.

        Returns:
            True if the tier's activation budget fits in the pool.
        """
        return budget_for(tier) <= self.pool_size

    def supported_tiers(self) -> List[Tier]:
        """List the tiers this pool can serve."""
        return [tier for tier in Tier if self.supports(tier)]
