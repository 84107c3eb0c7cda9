"""Configuration loader for YAML/JSON config files.

Provides loading and saving of trace replay configuration from
YAML or JSON files with support for default values.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from expert_router.core.config import RouterConfig
from expert_router.core.tier import Tier

DEFAULT_TIERS = [tier.value for tier in Tier]


@dataclass
class ReplayConfig:
    """Complete configuration for a trace replay.

    Attributes:
        pool_size: Total number of experts in the pool.
        strategy: Name of the router to replay with.
        num_steps: Number of consecutive steps to route per tier.
        start_step: First step index of the replay window.
        tiers: Tier names to replay.
    """

    pool_size: int = 64
    strategy: str = "deterministic"
    num_steps: int = 100
    start_step: int = 0
    tiers: List[str] = field(default_factory=lambda: list(DEFAULT_TIERS))

    def __post_init__(self) -> None:
        """Validate replay parameters."""
        if isinstance(self.pool_size, bool) or not isinstance(self.pool_size, int):
            raise TypeError(
                f"pool_size must be an int, got {type(self.pool_size).__name__}"
            )
        if self.pool_size <= 0:
            raise ValueError("pool_size must be positive")
        if self.num_steps <= 0:
            raise ValueError("num_steps must be positive")
        if self.start_step < 0:
            raise ValueError("start_step must be non-negative")
        if not self.tiers:
            raise ValueError("tiers must not be empty")

    def get_tiers(self) -> List[Tier]:
        """Resolve configured tier names.

        Raises:
            ValueError: If a name does not match a tier.
        """
        return [Tier.parse(name) for name in self.tiers]

    def to_router_config(self) -> RouterConfig:
        """Convert to RouterConfig.

        Returns:
            RouterConfig instance.
        """
        return RouterConfig(pool_size=self.pool_size, strategy=self.strategy)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "pool_size": self.pool_size,
            "strategy": self.strategy,
            "num_steps": self.num_steps,
            "start_step": self.start_step,
            "tiers": list(self.tiers),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReplayConfig":
        """Create from dictionary.

        Args:
            data: Dictionary with configuration values.

        Returns:
            ReplayConfig instance.
        """
        tiers = data.get("tiers", DEFAULT_TIERS)
        # A single tier may be given as a bare name
        if isinstance(tiers, str):
            tiers = [tiers]
        return cls(
            pool_size=data.get("pool_size", 64),
            strategy=data.get("strategy", "deterministic"),
            num_steps=data.get("num_steps", 100),
            start_step=data.get("start_step", 0),
            tiers=list(tiers),
        )


def load_config(path: Union[str, Path]) -> ReplayConfig:
    """Load configuration from YAML or JSON file.

    Args:
        path: Path to config file.

    Returns:
        ReplayConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If file format is not supported.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()
    with open(path, "r") as f:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    return ReplayConfig.from_dict(data or {})


def save_config(config: ReplayConfig, path: Union[str, Path]) -> None:
    """Save configuration to YAML or JSON file.

    Args:
        config: ReplayConfig to save.
        path: Path to output file.
    """
    path = Path(path)
    data = config.to_dict()
    suffix = path.suffix.lower()

    if suffix not in (".yaml", ".yml", ".json"):
        raise ValueError(f"Unsupported config format: {suffix}")

    with open(path, "w") as f:
        if suffix == ".json":
            json.dump(data, f, indent=2)
        else:
            yaml.dump(data, f, default_flow_style=False)
