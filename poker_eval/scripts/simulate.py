#!/usr/bin/env python3
"""Simulate many dealt hands and report how often each category comes up.

Two modes:
- CPU: deals rounds from a live deck and runs the reference evaluator
- Batched: deals and classifies hands in chunks with GPUHandClassifier

Usage:
    python -m poker_eval.scripts.simulate --rounds 1000
    python -m poker_eval.scripts.simulate --rounds 100000 --variant holdem --batched --seed 42
    python -m poker_eval.scripts.simulate --rounds 5 --verbose
"""

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np
import torch

from poker_eval.batch import GPUHandClassifier, category_counts, deal_random_hands
from poker_eval.engine import Game, SimulationStats, Variant
from poker_eval.rules import Category
from poker_eval.utils.seeding import make_generator, set_seed

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Simulation configuration."""

    rounds: int = 1000
    variant: Variant = Variant.FIVE_CARD_DRAW
    seed: Optional[int] = None

    # Batched mode
    batched: bool = False
    batch_size: int = 4096
    cuda: bool = True

    # Output
    verbose: bool = False


def run_simulation(config: SimulationConfig) -> SimulationStats:
    """Run the configured simulation and return category tallies."""
    seed = set_seed(config.seed)
    logger.info("Simulating %d %s rounds (seed=%d)", config.rounds, config.variant.value, seed)

    if not config.batched:
        game = Game(variant=config.variant, seed=seed, verbose=config.verbose)
        return game.simulate(config.rounds)

    device = torch.device("cuda" if config.cuda and torch.cuda.is_available() else "cpu")
    classifier = GPUHandClassifier(device)
    generator = make_generator(seed, device)

    stats = SimulationStats()
    remaining = config.rounds
    while remaining > 0:
        size = min(config.batch_size, remaining)
        hands = deal_random_hands(size, config.variant.hand_size, device, generator)
        stats.record_counts(category_counts(classifier.classify_batched(hands)))
        remaining -= size
    return stats


def standard_errors(stats: SimulationStats) -> np.ndarray:
    """Standard error of each category frequency, indexed by Category value."""
    if stats.total_rounds == 0:
        return np.zeros(len(Category))
    counts = np.array([stats.counts[c] for c in Category], dtype=np.float64)
    p = counts / stats.total_rounds
    return np.sqrt(p * (1.0 - p) / stats.total_rounds)


def format_report(stats: SimulationStats) -> str:
    errors = standard_errors(stats)
    lines = [f"Rounds: {stats.total_rounds}"]
    for category in sorted(Category, reverse=True):
        lines.append(
            f"  {category.tag:<16} {stats.counts[category]:>9}  "
            f"{stats.frequency(category):8.4%} ± {errors[category]:.4%}"
        )
    return "\n".join(lines)


def main():
    """Main entry point for the simulation script."""
    parser = argparse.ArgumentParser(
        description="Simulate dealt poker hands and tally their categories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m poker_eval.scripts.simulate --rounds 1000
  python -m poker_eval.scripts.simulate --rounds 100000 --variant holdem --batched
        """,
    )
    parser.add_argument(
        "--rounds",
        "-n",
        type=int,
        default=1000,
        help="Number of hands to deal (default: 1000)",
    )
    parser.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        default=Variant.FIVE_CARD_DRAW.value,
        help="draw: 5 cards; holdem: 2 pocket + 5 community (default: draw)",
    )
    parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Random seed for reproducibility"
    )
    parser.add_argument(
        "--batched", action="store_true", help="Classify hands in batches with PyTorch"
    )
    parser.add_argument(
        "--batch-size", type=int, default=4096, help="Hands per batch (default: 4096)"
    )
    parser.add_argument("--no-cuda", action="store_true", help="Stay on CPU in batched mode")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Print every hand (CPU mode only)"
    )
    args = parser.parse_args()

    if args.rounds < 0:
        print(f"Error: --rounds must be non-negative, got {args.rounds}")
        sys.exit(1)
    if args.batch_size <= 0:
        print(f"Error: --batch-size must be positive, got {args.batch_size}")
        sys.exit(1)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = SimulationConfig(
        rounds=args.rounds,
        variant=Variant(args.variant),
        seed=args.seed,
        batched=args.batched,
        batch_size=args.batch_size,
        cuda=not args.no_cuda,
        verbose=args.verbose,
    )

    start_time = time.time()
    try:
        stats = run_simulation(config)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user.")
        sys.exit(0)
    elapsed = time.time() - start_time

    print(format_report(stats))
    print(f"Time: {elapsed:.2f}s")


if __name__ == "__main__":
    main()
