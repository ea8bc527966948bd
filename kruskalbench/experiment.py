"""Timing experiment comparing the four Kruskal variants on random point sets."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import astuple, dataclass
from pathlib import Path
from typing import Callable, Sequence, TextIO, TypeVar

from .graph import Graph, Node, same_weights
from .kruskal import (
    kruskal_array,
    kruskal_array_compressed,
    kruskal_heap,
    kruskal_heap_compressed,
)

DEFAULT_CSV = Path("csv") / "resultados.csv"
MIN_EXPONENT = 5
MAX_EXPONENT = 13
REPEATS = 5

_T = TypeVar("_T")


class WeightMismatchError(RuntimeError):
    """The Kruskal variants disagreed on the total weight of the tree."""


@dataclass(frozen=True)
class ExperimentResult:
    """Times in seconds for one experiment over ``n`` nodes."""

    n: int
    construction: float
    array: float
    array_compressed: float
    heap: float
    heap_compressed: float

    def csv_row(self) -> str:
        """Return the comma-separated line stored for this experiment."""
        n, *times = astuple(self)
        return ",".join([str(n), *(f"{t:g}" for t in times)])


def _timed(action: Callable[[], _T]) -> tuple[_T, float]:
    start = time.perf_counter()
    value = action()
    return value, time.perf_counter() - start


def run_experiment(
    n: int,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> ExperimentResult:
    """Build a complete graph over ``n`` random points and time every variant.

    Raises :class:`WeightMismatchError` if the variants find trees of
    different total weight.
    """
    if n < 0:
        raise ValueError("number of nodes must not be negative")
    out = out if out is not None else sys.stdout
    rng = rng if rng is not None else random.Random()

    print(f"Building graph of {n} nodes", file=out)
    graph, construction = _timed(lambda: Graph(Node.random(rng) for _ in range(n)))
    print(f"Graph built in {construction:g} seconds.", file=out)

    variants = [
        ("a sorted array", kruskal_array),
        ("a sorted array and Union-Find", kruskal_array_compressed),
        ("a heap", kruskal_heap),
        ("a heap and Union-Find", kruskal_heap_compressed),
    ]
    trees = []
    durations = []
    for label, algorithm in variants:
        print(f"Searching spanning tree with {label}:", file=out)
        tree, elapsed = _timed(lambda: algorithm(graph))
        print(f"Tree found in {elapsed:g} seconds.", file=out)
        trees.append(tree)
        durations.append(elapsed)

    if not same_weights(*trees):
        raise WeightMismatchError("the variants did not reach the same weight")

    result = ExperimentResult(n, construction, *durations)
    rule = "-" * 25
    print(f"\n{rule}Experiment results:{rule}", file=out)
    print(f"|   Input size: {n} points.", file=out)
    print(f"|   Graph construction time: {construction:g}", file=out)
    print(
        "|   Kruskal without find optimisation using a sorted array: "
        f"{result.array:g} seconds.",
        file=out,
    )
    print(
        "|   Kruskal with find optimisation using a sorted array: "
        f"{result.array_compressed:g} seconds.",
        file=out,
    )
    print(
        f"|   Kruskal without find optimisation using a heap: {result.heap:g} seconds.",
        file=out,
    )
    print(
        "|   Kruskal with find optimisation using a heap: "
        f"{result.heap_compressed:g} seconds.",
        file=out,
    )
    print("-" * 77, file=out)
    return result


def append_csv(result: ExperimentResult, path: str | Path = DEFAULT_CSV) -> None:
    """Append the result's row to the CSV file at ``path``.

    Raises :class:`OSError` if the file cannot be opened for appending.
    """
    with open(path, "a", encoding="utf-8") as data:
        data.write(result.csv_row() + "\n")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="kruskalbench",
        description="Time Kruskal variants on complete graphs of 2**k random points.",
    )
    parser.add_argument("--min-exp", type=int, default=MIN_EXPONENT)
    parser.add_argument("--max-exp", type=int, default=MAX_EXPONENT)
    parser.add_argument("--repeats", type=int, default=REPEATS)
    parser.add_argument("--csv", type=Path, default=DEFAULT_CSV)
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the experiments for N = 2**k, each size several times."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    for exponent in range(args.min_exp, args.max_exp + 1):
        n = 2**exponent
        for _ in range(args.repeats):
            try:
                result = run_experiment(n, rng)
            except WeightMismatchError:
                print("Error: the same weights were not obtained", file=sys.stderr)
                return 1
            try:
                append_csv(result, args.csv)
            except OSError:
                print(
                    f"Could not write the summary to '{args.csv}'", file=sys.stderr
                )
    return 0


if __name__ == "__main__":
    sys.exit(main())