"""Routing decision and expert identifier types."""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Tuple

from expert_router.core.tier import Tier, budget_for

EXPERT_ID_WIDTH = 32
_INDEX_WIDTH = 4


@dataclass(frozen=True)
class ExpertId:
    """Fixed-width expert identifier used by the runtime's expert table.

    The expert index is stored little-endian in the first four bytes;
    the remaining bytes are zero.

    Attributes:
        raw: The 32 identifier bytes.
    """

    raw: bytes

    def __post_init__(self) -> None:
        """Validate identifier width."""
        if len(self.raw) != EXPERT_ID_WIDTH:
            raise ValueError(
                f"ExpertId must be {EXPERT_ID_WIDTH} bytes, got {len(self.raw)}"
            )

    @classmethod
    def from_index(cls, index: int) -> "ExpertId":
        """Encode an expert index as an identifier.

        Args:
            index: Expert index in [0, 2**32).

        Returns:
            ExpertId for the index.

        Raises:
            ValueError: If index does not fit in four bytes.
        """
        if not 0 <= index < 2 ** (8 * _INDEX_WIDTH):
            raise ValueError(f"expert index out of range: {index}")
        prefix = index.to_bytes(_INDEX_WIDTH, "little")
        return cls(prefix + bytes(EXPERT_ID_WIDTH - _INDEX_WIDTH))

    @property
    def index(self) -> int:
        """Expert index encoded in this identifier."""
        return int.from_bytes(self.raw[:_INDEX_WIDTH], "little")

    def hex(self) -> str:
        return self.raw.hex()


@dataclass(frozen=True)
class RoutingDecision:
    """Experts to activate for one inference step.

    Indices are kept in the order the router generated them. The tier and
    step that produced the decision are carried along for tracing.

    Attributes:
        tier: Tier the decision was made for.
        step: Inference step index.
        expert_indices: Distinct expert indices, one per budget slot.
    """

    tier: Tier
    step: int
    expert_indices: Tuple[int, ...]

    @property
    def budget(self) -> int:
        """Activation budget of the decision's tier."""
        return budget_for(self.tier)

    def expert_ids(self) -> List[ExpertId]:
        """Return the selected experts as fixed-width identifiers."""
        return [ExpertId.from_index(i) for i in self.expert_indices]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "tier": self.tier.value,
            "step": self.step,
            "expert_indices": list(self.expert_indices),
        }

    def __len__(self) -> int:
        return len(self.expert_indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.expert_indices)
