#!/usr/bin/env python3
"""
Tactical Benchmark Runner

Runs the tactical suite at multiple depths and reports search speed.
Tree size from the empty board is printed alongside as a move generation
check.

Usage:
    python tools/run_benchmark.py [--depths 1,2,3,4] [--seed 42] [--verbose]
"""

import sys
import argparse
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from connect_four.board import empty_board
from connect_four.evaluation import RandomEvaluator
from connect_four.utils.testing import count_nodes, run_tactics


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


def run_benchmark(depths: list[int], seed=None, verbose: bool = False):
    """
    Run the tactical suite at multiple depths.

    Args:
        depths: List of depths to test
        seed: Seed for the placeholder evaluator
        verbose: If True, print detailed results for each position
    """
    evaluator = RandomEvaluator(seed=seed)

    print("=" * 72)
    print("TACTICAL BENCHMARK - Connect 4 Solver")
    print("=" * 72)
    print(f"Evaluator: {evaluator!r}")
    print(f"Search: Plain minimax")
    print(f"Depths: {depths}")
    print("=" * 72)

    all_results = []

    for depth in depths:
        print(f"\nDEPTH {depth}")
        print("-" * 72)

        start_time = time.time()
        tree_size = count_nodes(empty_board(), depth)
        count_time = time.time() - start_time

        result = run_tactics(evaluator, depth=depth, verbose=verbose)

        total_nodes = sum(r.nodes_searched for r in result['results'])
        search_time = sum(r.time_taken for r in result['results'])
        nodes_per_sec = total_nodes / search_time if search_time > 0 else 0

        all_results.append({
            'depth': depth,
            'score': result['score'],
            'total': result['total'],
            'percentage': result['percentage'],
            'avg_time': result['avg_time'],
            'tree_size': tree_size,
            'nodes_per_sec': nodes_per_sec,
        })

        print(f"  Correct: {result['score']}/{result['total']} ({result['percentage']:.1f}%)")
        print(f"  Avg time per position: {format_time(result['avg_time'])}")
        print(f"  Nodes/sec: {nodes_per_sec:,.0f}")
        print(f"  Empty-board tree: {tree_size:,} nodes ({format_time(count_time)})")

        failed = [r for r in result['results'] if not r.correct]
        if failed and verbose:
            print(f"\n  Failed positions:")
            for r in failed:
                print(f"    {r.position.id}: Expected {r.position.best_move}, got {r.found_move}")

    print("\n" + "=" * 72)
    print("SUMMARY TABLE")
    print("=" * 72)
    print(f"{'Depth':<8} {'Correct':<12} {'%':<8} {'Avg Time':<12} {'Nodes/sec':<15} {'Tree':<12}")
    print("-" * 72)

    for r in all_results:
        print(f"{r['depth']:<8} {r['score']}/{r['total']:<10} {r['percentage']:<7.1f}% {format_time(r['avg_time']):<12} {r['nodes_per_sec']:>12,.0f}   {r['tree_size']:>10,}")

    print("=" * 72)

    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Run the tactical benchmark at multiple depths"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="1,2,3,4",
        help="Comma-separated list of depths to test (default: 1,2,3,4)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the placeholder evaluator"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each position"
    )

    args = parser.parse_args()

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        print("Error: depths must be comma-separated integers")
        sys.exit(1)

    try:
        run_benchmark(depths, seed=args.seed, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
