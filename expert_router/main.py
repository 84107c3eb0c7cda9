"""Main entry point for the expert router CLI.

Replays routing traces over a window of steps, or prints a single
routing decision.
"""

import argparse
import logging
import sys

from expert_router.core import ReplayConfig, Tier, create_runner, load_config

logger = logging.getLogger(__name__)


def parse_args(args=None):
    """Parse command-line arguments.

    Args:
        args: Arguments to parse. If None, uses sys.argv.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        description="Expert Router - deterministic MoE expert selection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Replay 100 steps for every tier over a 64-expert pool
  expert-router

  # Replay selected tiers from a config file
  expert-router --config replay.yaml --tiers nano,pro

  # Show the experts activated for one step
  expert-router --tier standard --step 1 --pool-size 8

  # Save replay results to CSV
  expert-router --output results.csv
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to YAML or JSON config file",
    )

    parser.add_argument(
        "--tiers",
        type=str,
        help="Comma-separated list of tiers to replay (default: from config)",
    )

    parser.add_argument(
        "--pool-size",
        type=int,
        help="Number of experts in the pool (overrides config)",
    )

    parser.add_argument(
        "--num-steps",
        type=int,
        help="Number of steps to replay (overrides config)",
    )

    parser.add_argument(
        "--start-step",
        type=int,
        help="First step of the replay window (overrides config)",
    )

    parser.add_argument(
        "--strategy",
        type=str,
        help="Router strategy name (overrides config)",
    )

    parser.add_argument(
        "--tier",
        type=str,
        help="Route a single step for this tier instead of replaying",
    )

    parser.add_argument(
        "--step",
        type=int,
        default=0,
        help="Step index for --tier (default: 0)",
    )

    parser.add_argument(
        "--ids",
        action="store_true",
        help="With --tier, also print 32-byte expert ids",
    )

    parser.add_argument(
        "--output",
        type=str,
        help="Path to output CSV file",
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress console output",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(args)


def _route_single(config: ReplayConfig, parsed) -> int:
    runner = create_runner(config)
    tier = Tier.parse(parsed.tier)
    decision = runner.route_step(tier, parsed.step)

    print(
        f"tier={decision.tier.value} step={decision.step} "
        f"pool_size={config.pool_size} experts={list(decision.expert_indices)}"
    )
    if parsed.ids:
        for expert_id in decision.expert_ids():
            print(f"  {expert_id.index:>6}  {expert_id.hex()}")
    return 0


def main(args=None):
    """Main entry point.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success).
    """
    parsed = parse_args(args)

    if parsed.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    try:
        config = load_config(parsed.config) if parsed.config else ReplayConfig()

        # Override config with command-line arguments
        if parsed.pool_size is not None:
            config.pool_size = parsed.pool_size
        if parsed.num_steps is not None:
            config.num_steps = parsed.num_steps
        if parsed.start_step is not None:
            config.start_step = parsed.start_step
        if parsed.strategy is not None:
            config.strategy = parsed.strategy
        if parsed.tiers:
            config.tiers = [s.strip() for s in parsed.tiers.split(",")]
        # Re-run validation after overrides
        config = ReplayConfig.from_dict(config.to_dict())

        if parsed.tier:
            return _route_single(config, parsed)

        tiers = config.get_tiers()
        runner = create_runner(config)

        if not parsed.quiet:
            print("=" * 60)
            print("Expert Router Replay")
            print("=" * 60)
            print(f"Pool size: {config.pool_size}")
            print(f"Strategy: {config.strategy}")
            print(
                f"Steps: {config.start_step}..{config.start_step + config.num_steps - 1}"
            )
            print(f"Tiers: {', '.join(t.value for t in tiers)}")
            print("=" * 60)

        aggregator = runner.run(tiers=tiers)
    except (FileNotFoundError, KeyError, TypeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug(f"replay_done: results={len(aggregator)}")

    if not parsed.quiet:
        print("\nResults:")
        print(aggregator.get_summary_table())

    if parsed.output:
        aggregator.to_csv(parsed.output)
        if not parsed.quiet:
            print(f"\nResults written to: {parsed.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
