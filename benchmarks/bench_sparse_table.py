from __future__ import annotations

import argparse
import random
import statistics
import time
from typing import Dict, List, Sequence, Tuple

import numpy as np

from sparse_rmq.common.constants import RNG_SEEDS, seed_everywhere
from sparse_rmq.reference import naive_smallest
from sparse_rmq.sparse_table import SparseTable


def latency_summary(samples: Sequence[float]) -> Dict[str, float]:
    if not samples:
        return {"count": 0}
    arr = np.array(samples, dtype=float) * 1e6
    return {
        "count": float(arr.size),
        "mean_us": float(arr.mean()),
        "p50_us": float(np.percentile(arr, 50)),
        "p95_us": float(np.percentile(arr, 95)),
        "max_us": float(arr.max()),
    }


def random_ranges(rng: random.Random, n: int, count: int) -> List[Tuple[int, int]]:
    ranges = []
    for _ in range(count):
        l = rng.randrange(n)
        r = rng.randint(l + 1, n)
        ranges.append((l, r))
    return ranges


def time_queries(fn, ranges: Sequence[Tuple[int, int]]) -> List[float]:
    durations: List[float] = []
    for l, r in ranges:
        start = time.perf_counter()
        fn(l, r)
        durations.append(time.perf_counter() - start)
    return durations


def run_benchmark(args: argparse.Namespace) -> None:
    seed_everywhere(args.seed)
    rng = random.Random(args.seed)
    values = [rng.randint(-(10**9), 10**9) for _ in range(args.n)]

    build_times: List[float] = []
    table = None
    for _ in range(args.repeat):
        start = time.perf_counter()
        table = SparseTable(values)
        build_times.append(time.perf_counter() - start)
    assert table is not None

    ranges = random_ranges(rng, args.n, args.queries)
    table_lat = time_queries(table.smallest, ranges)
    naive_lat = time_queries(lambda l, r: naive_smallest(values, l, r), ranges)

    mismatches = sum(
        1 for l, r in ranges if table.smallest(l, r) != naive_smallest(values, l, r)
    )

    print(f"n={args.n} levels={table.levels} queries={args.queries}")
    print(
        f"build: median {statistics.median(build_times) * 1e3:.2f} ms "
        f"over {args.repeat} run(s)"
    )
    for name, samples in (("sparse", table_lat), ("naive", naive_lat)):
        summary = latency_summary(samples)
        print(
            f"{name:>6}: mean {summary['mean_us']:.2f} us  p50 {summary['p50_us']:.2f} us  "
            f"p95 {summary['p95_us']:.2f} us  max {summary['max_us']:.2f} us"
        )
    if mismatches:
        raise SystemExit(f"{mismatches} query results disagree with the linear scan")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark sparse-table range-minimum queries")
    parser.add_argument("--n", type=int, default=100_000, help="sequence length")
    parser.add_argument("--queries", type=int, default=2_000, help="number of random ranges")
    parser.add_argument("--repeat", type=int, default=3, help="build repetitions")
    parser.add_argument("--seed", type=int, default=RNG_SEEDS["bench"])
    args = parser.parse_args(argv)
    if args.n <= 0:
        parser.error("--n must be positive")
    return args


if __name__ == "__main__":
    run_benchmark(parse_args())
