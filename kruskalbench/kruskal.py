"""Four variants of Kruskal's minimum spanning tree algorithm."""

from __future__ import annotations

import heapq
from operator import attrgetter
from typing import Callable, Iterable, Iterator

from .graph import Edge, Graph
from .unionfind import UnionFind


def _by_sorting(graph: Graph) -> Iterator[Edge]:
    return iter(sorted(graph.edges, key=attrgetter("weight")))


def _by_heap(graph: Graph) -> Iterator[Edge]:
    heap = [(edge.weight, i, edge) for i, edge in enumerate(graph.edges)]
    heapq.heapify(heap)
    while heap:
        yield heapq.heappop(heap)[2]


def _spanning_tree(
    graph: Graph,
    ordered: Iterable[Edge],
    find: Callable[[UnionFind, int], int],
) -> list[Edge]:
    needed = len(graph) - 1
    result: list[Edge] = []
    if needed <= 0:
        return result
    sets = UnionFind(len(graph))
    for edge in ordered:
        root_x = find(sets, edge.first.id)
        root_y = find(sets, edge.second.id)
        if root_x != root_y:
            sets.union(root_x, root_y)
            result.append(edge)
            if len(result) == needed:
                break
    return result


def kruskal_array(graph: Graph) -> list[Edge]:
    """Spanning tree from a sorted edge list, without path compression."""
    return _spanning_tree(graph, _by_sorting(graph), UnionFind.find_no_compression)


def kruskal_array_compressed(graph: Graph) -> list[Edge]:
    """Spanning tree from a sorted edge list, with path compression."""
    return _spanning_tree(graph, _by_sorting(graph), UnionFind.find)


def kruskal_heap(graph: Graph) -> list[Edge]:
    """Spanning tree from a binary heap of edges, without path compression."""
    return _spanning_tree(graph, _by_heap(graph), UnionFind.find_no_compression)


def kruskal_heap_compressed(graph: Graph) -> list[Edge]:
    """Spanning tree from a binary heap of edges, with path compression."""
    return _spanning_tree(graph, _by_heap(graph), UnionFind.find)