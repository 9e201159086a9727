#!/usr/bin/env python3
"""
Compare minimax and alpha-beta on random starting numbers.
Prints mean/median node counts and timings per algorithm and depth.
"""

import argparse
import random

from config import setup_logging
from divgame.benchmark import benchmark_strategies
from divgame.session import random_start_number


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark the division game search strategies")
    parser.add_argument("--games", "-n", type=int, default=200, help="Number of start numbers")
    parser.add_argument("--depths", type=int, nargs="+", default=[3, 5, 7], help="Depths to test")
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()

    setup_logging("WARNING")
    rng = random.Random(args.seed)
    numbers = [random_start_number(rng) for _ in range(args.games)]

    print("Search Strategy Benchmark")
    print("-" * 60)
    for depth in args.depths:
        results = benchmark_strategies(numbers, depth)
        agree = (results["minimax"].moves == results["alphabeta"].moves).all()
        print(f"depth {depth} ({args.games} positions, same moves: {'yes' if agree else 'NO'})")
        for name, res in results.items():
            s = res.summary()
            print(f"  {name:<10} mean nodes {s['mean_nodes']:8.1f}  median {s['median_nodes']:7.1f}  "
                  f"max {s['max_nodes']:6d}  mean {s['mean_ms']:.3f} ms")
        mm = results["minimax"].summary()["mean_nodes"]
        ab = results["alphabeta"].summary()["mean_nodes"]
        if mm:
            print(f"  alpha-beta visits {100.0 * ab / mm:.1f}% of minimax nodes")


if __name__ == "__main__":
    main()
