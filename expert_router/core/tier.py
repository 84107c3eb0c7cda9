"""Service tiers and their activation budgets.

The tier-to-budget table is part of the routing contract: changing a
budget changes which experts are activated, so it lives in code rather
than in runtime configuration.
"""

from enum import Enum
from typing import Dict, Union


class Tier(str, Enum):
    """Service tier requested for an inference step.

    Attributes:
        NANO: Smallest budget, two experts per step.
        STANDARD: Four experts per step.
        PRO: Eight experts per step.
        MAX: Sixteen experts per step.
    """

    NANO = "nano"
    STANDARD = "standard"
    PRO = "pro"
    MAX = "max"

    @classmethod
    def parse(cls, value: Union[str, "Tier"]) -> "Tier":
        """Resolve a tier from its name.

        Args:
            value: A Tier, or a tier name such as "standard" or "Pro".

        Returns:
            The matching Tier.

        Raises:
            ValueError: If the name does not match any tier.
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        for tier in cls:
            if tier.value == name:
                return tier
        valid = [tier.value for tier in cls]
        raise ValueError(f"Unknown tier '{value}'. Available: {valid}")


TIER_BUDGETS: Dict[Tier, int] = {
    Tier.NANO: 2,
    Tier.STANDARD: 4,
    Tier.PRO: 8,
    Tier.MAX: 16,
}

_missing = [tier.value for tier in Tier if tier not in TIER_BUDGETS]
if _missing:
    raise RuntimeError(f"No activation budget defined for tiers: {_missing}")


def budget_for(tier: Tier) -> int:
    """Return the number of experts activated per step for a tier.

    Args:
        tier: Service tier.

    Returns:
        Activation budget (always positive).
    """
    return TIER_BUDGETS[tier]
