"""Results aggregator for trace replay output.

Provides data structures and CSV output for replay results.
"""

import csv
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


@dataclass
class ReplayResult:
    """Load summary of one tier replayed over a window of steps."""

    tier: str
    budget: int
    pool_size: int
    num_steps: int

    total_activations: int = 0
    experts_covered: int = 0
    coverage_ratio: float = 0.0
    steps_to_full_coverage: Optional[int] = None  # None if never reached

    # Per-expert activation counts
    min_load: int = 0
    max_load: int = 0
    mean_load: float = 0.0
    load_imbalance: float = 0.0  # max / mean

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "tier": self.tier,
            "budget": self.budget,
            "pool_size": self.pool_size,
            "num_steps": self.num_steps,
            "total_activations": self.total_activations,
            "experts_covered": self.experts_covered,
            "coverage_ratio": self.coverage_ratio,
            "steps_to_full_coverage": self.steps_to_full_coverage,
            "min_load": self.min_load,
            "max_load": self.max_load,
            "mean_load": self.mean_load,
            "load_imbalance": self.load_imbalance,
        }

    @property
    def fully_covered(self) -> bool:
        """Whether every expert was activated during the replay."""
        return self.experts_covered == self.pool_size


@dataclass
class ResultsAggregator:
    """Aggregates and manages replay results.

    Collects results from multiple tiers and provides
    output in various formats.
    """

    results: List[ReplayResult] = field(default_factory=list)
    config: Optional[Dict[str, Any]] = None

    def add_result(self, result: ReplayResult) -> None:
        """Add a result to the aggregator.

        Args:
            result: ReplayResult to add.
        """
        self.results.append(result)

    def add_results(self, results: List[ReplayResult]) -> None:
        """Add multiple results.

        Args:
            results: List of ReplayResult to add.
        """
        self.results.extend(results)

    def get_result_for_tier(self, tier: str) -> Optional[ReplayResult]:
        """Get the result for a tier name, if it was replayed."""
        for result in self.results:
            if result.tier == tier:
                return result
        return None

    def to_csv(self, path: Union[str, Path]) -> None:
        """Write results to CSV file.

        A replay with no results still writes the header row.

        Args:
            path: Path to output CSV file.
        """
        path = Path(path)
        fieldnames = [f.name for f in fields(ReplayResult)]

        with open(path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for result in self.results:
                writer.writerow(result.to_dict())

    def to_list_of_dicts(self) -> List[Dict[str, Any]]:
        """Convert results to list of dictionaries.

        Returns:
            List of result dictionaries.
        """
        return [r.to_dict() for r in self.results]

    def get_summary_table(self) -> str:
        """Generate a formatted summary table for console output.

        Returns:
            Formatted table string.
        """
        if not self.results:
            return "No results to display."

        lines = []

        header = (
            f"{'Tier':<10} {'Budget':>6} {'Pool':>6} {'Steps':>7} "
            f"{'Covered':>8} {'Full@':>6} "
            f"{'Min':>6} {'Max':>6} {'Imbalance':>10}"
        )
        lines.append(header)
        lines.append("-" * len(header))

        for result in sorted(self.results, key=lambda r: r.budget):
            full_at = (
                "-"
                if result.steps_to_full_coverage is None
                else str(result.steps_to_full_coverage)
            )
            line = (
                f"{result.tier:<10} {result.budget:>6} {result.pool_size:>6} "
                f"{result.num_steps:>7} {result.coverage_ratio:>8.1%} {full_at:>6} "
                f"{result.min_load:>6} {result.max_load:>6} "
                f"{result.load_imbalance:>10.3f}"
            )
            lines.append(line)

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all results."""
        self.results.clear()
        self.config = None

    def __len__(self) -> int:
        """Return number of results."""
        return len(self.results)

    def __bool__(self) -> bool:
        """Return True if there are results."""
        return bool(self.results)
