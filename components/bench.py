"""
Timing harness for the heap and trie operations.

Each operation is timed over several fresh workloads per input size; the
results come back as a pandas DataFrame with one row per
(structure, operation, size).

Usage:
    python -m components.bench --sizes 100 1000 5000 --iterations 5 --csv bench.csv
"""

import argparse
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from heaps import MinHeap
from tries import Trie

from .work_loads import WorkLoad

logger = logging.getLogger(__name__)

COLUMNS = ["structure", "operation", "size", "mean_ms", "std_ms"]


@dataclass
class BenchConfig:
    """
    Configuration for run_benchmarks
        sizes: input sizes to time
        iterations: fresh workloads per size
        seed: base seed; iteration i uses seed + i
        p_freq: prefix frequency of trie workloads (0 = plain random words)
    """
    sizes: List[int] = field(default_factory=lambda: [100, 1_000, 5_000])
    iterations: int = 5
    seed: Optional[int] = 0
    p_freq: float = 0.5

    def __post_init__(self):
        if not self.sizes or any(s < 1 for s in self.sizes):
            raise ValueError("sizes must be a non-empty list of positive ints")
        if self.iterations < 1:
            raise ValueError("iterations must be at least 1")


# ----------------------------
# Operations to Benchmark
# Each builds its structure untimed, then returns the elapsed ms of the operation.
# ----------------------------

def _timed(fn) -> float:
    start = time.perf_counter()
    fn()
    return (time.perf_counter() - start) * 1000


def heap_add(data) -> float:
    heap = MinHeap()
    return _timed(lambda: [heap.add(x) for x in data])


def heap_extract_min(data) -> float:
    heap = MinHeap(data)
    return _timed(lambda: [heap.extract_min() for _ in range(len(data))])


def heap_peek(data) -> float:
    heap = MinHeap(data)
    return _timed(lambda: [heap.peek() for _ in range(len(data))])


def trie_add(words) -> float:
    trie = Trie()
    return _timed(lambda: [trie.add(w) for w in words])


def trie_has(words) -> float:
    trie = Trie(words)
    return _timed(lambda: [trie.has(w) for w in words])


def trie_search(words) -> float:
    trie = Trie(words)
    return _timed(lambda: [trie.search(w[:2]) for w in words])


def trie_remove(words) -> float:
    trie = Trie(words)
    return _timed(lambda: [trie.remove(w) for w in words])


OPERATIONS: Dict[Tuple[str, str], Callable] = {
    ("heap", "add"): heap_add,
    ("heap", "extract_min"): heap_extract_min,
    ("heap", "peek"): heap_peek,
    ("trie", "add"): trie_add,
    ("trie", "has"): trie_has,
    ("trie", "search"): trie_search,
    ("trie", "remove"): trie_remove,
}


def _workload(structure, size, seed, p_freq):
    load = WorkLoad(seed)
    if structure == "heap":
        return load.numbers(size)
    return load.words(size, p_freq=p_freq)


def run_benchmarks(config: Optional[BenchConfig] = None) -> pd.DataFrame:
    """Time every operation at every size and return the summary table."""
    config = config or BenchConfig()
    rows = []
    for (structure, op_name), op in OPERATIONS.items():
        for size in config.sizes:
            times = []
            for i in range(config.iterations):
                seed = None if config.seed is None else config.seed + i
                times.append(op(_workload(structure, size, seed, config.p_freq)))
            samples = np.asarray(times)
            std = float(samples.std(ddof=1)) if samples.size > 1 else 0.0
            rows.append([structure, op_name, size, float(samples.mean()), std])
            logger.info("%s %-12s | Size: %-8d | Avg Time: %.3f ms | Std: %.3f ms",
                        structure, op_name, size, rows[-1][3], std)
    return pd.DataFrame(rows, columns=COLUMNS)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Time MinHeap and Trie operations")
    parser.add_argument("--sizes", type=int, nargs="+", default=[100, 1_000, 5_000])
    parser.add_argument("--iterations", type=int, default=5)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--p-freq", type=float, default=0.5)
    parser.add_argument("--csv", help="write the result table to this path")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    df = run_benchmarks(BenchConfig(sizes=args.sizes, iterations=args.iterations,
                                    seed=args.seed, p_freq=args.p_freq))
    if args.csv:
        df.to_csv(args.csv, index=False)
        logger.info("Benchmark completed. Results saved to %s", args.csv)
    print(df.to_string(index=False))


if __name__ == "__main__":
    main()
