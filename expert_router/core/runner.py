"""Trace replay runner.

Replays a window of inference steps through a router for each tier and
summarizes how activations spread across the expert pool. Used to
reproduce routing traces and compare them between runs.
"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from expert_router.core.config_loader import ReplayConfig
from expert_router.core.decision import RoutingDecision
from expert_router.core.results import ReplayResult, ResultsAggregator
from expert_router.core.tier import Tier, budget_for
from expert_router.strategies.factory import RouterFactory

logger = logging.getLogger(__name__)


def coverage_cycle(budget: int, pool_size: int) -> int:
    """Number of consecutive steps after which every expert has been used.

    Args:
        budget: Experts activated per step.
        pool_size: Total number of experts.

    Returns:
        ceil(pool_size / budget).
    """
    return -(-pool_size // budget)


def expert_loads(decisions: Sequence[RoutingDecision], pool_size: int) -> np.ndarray:
    """Count how often each expert was activated.

    Args:
        decisions: Routing decisions to tally.
        pool_size: Total number of experts.

    Returns:
        Integer array of shape (pool_size,) with activation counts.
    """
    if not decisions:
        return np.zeros(pool_size, dtype=np.int64)
    indices = np.concatenate(
        [np.asarray(d.expert_indices, dtype=np.int64) for d in decisions]
    )
    return np.bincount(indices, minlength=pool_size)


def steps_to_full_coverage(
    decisions: Sequence[RoutingDecision], pool_size: int
) -> Optional[int]:
    """Number of leading decisions needed to activate every expert.

    Returns:
        Step count, or None if the decisions never cover the whole pool.
    """
    seen = np.zeros(pool_size, dtype=bool)
    for count, decision in enumerate(decisions, start=1):
        seen[list(decision.expert_indices)] = True
        if seen.all():
            return count
    return None


class ReplayRunner:
    """Runner that replays routing decisions over a window of steps."""

    def __init__(self, config: ReplayConfig) -> None:
        """Initialize replay runner.

        Args:
            config: Replay configuration.

        Raises:
            KeyError: If the configured strategy is not registered.
        """
        self.config = config
        self.router_config = config.to_router_config()
        RouterFactory.default()
        self.router = RouterFactory.create(self.router_config.strategy)

    def route_step(self, tier: Tier, step: int) -> RoutingDecision:
        """Route a single step against the configured pool."""
        return self.router.route(tier, step, self.router_config.pool_size)

    def trace(self, tier: Tier) -> List[RoutingDecision]:
        """Route every step of the replay window for one tier.

        Raises:
            RoutingError: If the pool cannot serve the tier.
        """
        first = self.config.start_step
        return [
            self.route_step(tier, step)
            for step in range(first, first + self.config.num_steps)
        ]

    def run_tier(self, tier: Tier) -> ReplayResult:
        """Replay one tier and summarize its expert loads.

        Args:
            tier: Tier to replay.

        Returns:
            ReplayResult with coverage and load metrics.
        """
        pool_size = self.router_config.pool_size
        decisions = self.trace(tier)
        loads = expert_loads(decisions, pool_size)

        covered = int(np.count_nonzero(loads))
        mean_load = float(loads.mean())
        max_load = int(loads.max())

        result = ReplayResult(
            tier=tier.value,
            budget=budget_for(tier),
            pool_size=pool_size,
            num_steps=self.config.num_steps,
            total_activations=int(loads.sum()),
            experts_covered=covered,
            coverage_ratio=covered / pool_size,
            steps_to_full_coverage=steps_to_full_coverage(decisions, pool_size),
            min_load=int(loads.min()),
            max_load=max_load,
            mean_load=mean_load,
            load_imbalance=max_load / mean_load if mean_load > 0 else 0.0,
        )
        logger.debug(
            f"replay_tier_done: tier={tier.value}, covered={covered}/{pool_size}, "
            f"full_at={result.steps_to_full_coverage}"
        )
        return result

    def run(self, tiers: Optional[List[Tier]] = None) -> ResultsAggregator:
        """Replay all requested tiers.

        Tiers whose budget does not fit the pool are skipped: the runtime
        refuses to serve them instead of degrading routing.

        Args:
            tiers: Tiers to replay. If None, uses config.

        Returns:
            ResultsAggregator containing one result per served tier.
        """
        if tiers is None:
            tiers = self.config.get_tiers()

        aggregator = ResultsAggregator()
        aggregator.config = self.config.to_dict()

        for tier in tiers:
            if not self.router_config.supports(tier):
                logger.warning(
                    f"replay_tier_skipped: tier={tier.value}, "
                    f"budget={budget_for(tier)}, pool_size={self.router_config.pool_size}"
                )
                continue
            aggregator.add_result(self.run_tier(tier))

        return aggregator


def create_runner(config: Optional[ReplayConfig] = None, **kwargs) -> ReplayRunner:
    """Create a replay runner with config.

    Args:
        config: ReplayConfig instance. If None, creates from kwargs.
        **kwargs: Config parameters (used if config is None).

    Returns:
        ReplayRunner instance.
    """
    if config is None:
        config = ReplayConfig(**kwargs)
    return ReplayRunner(config)
