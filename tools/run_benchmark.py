#!/usr/bin/env python3
"""
Difficulty Tier Benchmark Runner

Runs the tactical test suite for each difficulty tier and, optionally,
plays tier-vs-tier matches to check that harder tiers actually win more.

Usage:
    python tools/run_benchmark.py [--tiers easy,medium,hard] [--games 4] [--verbose]
"""

import argparse
import logging
import sys
import time
from itertools import combinations
from pathlib import Path

from tqdm import tqdm

sys.path.insert(0, str(Path(__file__).parent.parent))

from chess_ai.config import Difficulty
from chess_ai.log import setup_logger
from chess_ai.policy import create_chess_ai
from chess_ai.utils.testing import TACTICAL_POSITIONS, evaluate_position, play_match


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_tactics(tiers: list[Difficulty], seed: int, verbose: bool = False) -> list[dict]:
    """
    Run the tactical suite once per tier.

    Returns:
        One summary dict per tier (tier, score, total, avg_time, failed)
    """
    summaries = []

    for tier in tiers:
        ai = create_chess_ai(tier, seed=seed)
        results = []

        for position in tqdm(TACTICAL_POSITIONS, desc=f"{tier.value:>6} tactics", leave=False):
            results.append(evaluate_position(position, ai, verbose=verbose))

        correct = sum(1 for r in results if r.correct)
        total_time = sum(r.time_taken for r in results)

        summaries.append({
            'tier': tier,
            'score': correct,
            'total': len(results),
            'avg_time': total_time / len(results) if results else 0,
            'failed': [r for r in results if not r.correct],
        })

    return summaries


def run_matches(tiers: list[Difficulty], games: int, max_plies: int, seed: int) -> dict:
    """
    Play every pair of tiers against each other, alternating colours.

    Returns:
        Mapping (tier_a, tier_b) -> [wins_a, wins_b, draws, unfinished]
    """
    table = {}
    pairs = list(combinations(tiers, 2))

    with tqdm(total=len(pairs) * games, desc="matches") as pbar:
        for tier_a, tier_b in pairs:
            tally = [0, 0, 0, 0]

            for game in range(games):
                ai_a = create_chess_ai(tier_a, seed=seed + game)
                ai_b = create_chess_ai(tier_b, seed=seed + game + 1000)
                a_is_white = game % 2 == 0
                white, black = (ai_a, ai_b) if a_is_white else (ai_b, ai_a)

                match = play_match(white, black, max_plies=max_plies)

                if match.result == "1/2-1/2":
                    tally[2] += 1
                elif match.result == "*":
                    tally[3] += 1
                elif (match.result == "1-0") == a_is_white:
                    tally[0] += 1
                else:
                    tally[1] += 1

                pbar.update(1)

            table[(tier_a, tier_b)] = tally

    return table


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark the difficulty tiers",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--tiers",
        type=str,
        default="easy,medium,hard",
        help="Comma-separated list of tiers to test",
    )
    parser.add_argument(
        "--games",
        type=int,
        default=0,
        help="Games per tier pairing (0 = tactics only)",
    )
    parser.add_argument(
        "--max-plies",
        type=int,
        default=120,
        help="Half-move limit per game",
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write engine debug log to this file instead of the console",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each position",
    )

    args = parser.parse_args()

    if args.log_file:
        setup_logger(debug=args.verbose, log_file=args.log_file)
    else:
        setup_logging(args.verbose)

    try:
        tiers = [Difficulty.parse(t) for t in args.tiers.split(",")]
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    start_time = time.time()

    summaries = run_tactics(tiers, args.seed, verbose=args.verbose)

    print("=" * 60)
    print("TACTICAL SUITE")
    print("=" * 60)
    print(f"{'Tier':<8} {'Correct':<10} {'Avg Time':<12}")
    print("-" * 60)
    for s in summaries:
        print(f"{s['tier'].value:<8} {s['score']}/{s['total']:<8} {format_time(s['avg_time']):<12}")
        if args.verbose:
            for r in s['failed']:
                print(f"    {r.position.id}: Expected {r.position.best_moves}, got {r.found_move}")

    if args.games > 0 and len(tiers) >= 2:
        table = run_matches(tiers, args.games, args.max_plies, args.seed)

        print("\n" + "=" * 60)
        print("MATCHES (wins / losses / draws / unfinished)")
        print("=" * 60)
        for (tier_a, tier_b), (wins, losses, draws, unfinished) in table.items():
            print(f"{tier_a.value:>6} vs {tier_b.value:<6}  {wins} / {losses} / {draws} / {unfinished}")

    print(f"\nBenchmark complete in {format_time(time.time() - start_time)}")


if __name__ == "__main__":
    main()
