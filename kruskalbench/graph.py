"""Points in the plane and the complete graph over them."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass, replace
from itertools import combinations
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Node:
    """A point ``(x, y)``; ``id`` is assigned by the graph that holds it."""

    x: float
    y: float
    id: int = -1

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> Node:
        """Return a node with both coordinates drawn uniformly from [0, 1)."""
        rng = rng if rng is not None else _random.Random()
        return cls(rng.random(), rng.random())


@dataclass(frozen=True)
class Edge:
    """An edge whose weight is the squared Euclidean distance of its ends."""

    first: Node
    second: Node
    weight: float

    @classmethod
    def between(cls, first: Node, second: Node) -> Edge:
        weight = (first.x - second.x) ** 2 + (first.y - second.y) ** 2
        return cls(first, second, weight)

    @property
    def ends(self) -> tuple[int, int]:
        return self.first.id, self.second.id


class Graph:
    """The complete undirected graph over a list of nodes, without self-loops."""

    def __init__(self, nodes: Iterable[Node]) -> None:
        self.nodes: list[Node] = [replace(node, id=i) for i, node in enumerate(nodes)]
        self.edges: list[Edge] = [
            Edge.between(a, b) for a, b in combinations(self.nodes, 2)
        ]

    def __len__(self) -> int:
        return len(self.nodes)

    def describe(self) -> str:
        """Return a listing of the nodes with coordinates and edges with weights."""
        node_text = "".join(
            f"  Node {node.id}:({node.x:g}, {node.y:g}), " for node in self.nodes
        )
        edge_text = "".join(
            f"  ({e.first.id}, {e.second.id})  weight: {e.weight:g}\n"
            for e in self.edges
        )
        return f"\nNodes:\n{node_text}\nEdges:\n{edge_text}"


def format_edges(edges: Iterable[Edge]) -> str:
    """Return a one-line listing of the chosen edges and their weights."""
    parts = "".join(
        f"({e.first.id},{e.second.id})->w:{e.weight:g}  " for e in edges
    )
    return f"Edges minimizing the weight: {parts}"


def total_weight(edges: Iterable[Edge]) -> float:
    """Return the sum of the weights, independent of edge order."""
    return math.fsum(e.weight for e in edges)


def same_weights(*edge_lists: Sequence[Edge]) -> bool:
    """Tell whether every edge list has the same total weight."""
    totals = {total_weight(edges) for edges in edge_lists}
    return len(totals) <= 1