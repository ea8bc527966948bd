import random

import pytest

from kruskalbench.graph import Graph, Node, same_weights, total_weight
from kruskalbench.kruskal import (
    kruskal_array,
    kruskal_array_compressed,
    kruskal_heap,
    kruskal_heap_compressed,
)
from kruskalbench.unionfind import UnionFind

VARIANTS = [kruskal_array, kruskal_array_compressed, kruskal_heap, kruskal_heap_compressed]


def _random_graph(n, seed):
    rng = random.Random(seed)
    return Graph(Node.random(rng) for _ in range(n))


@pytest.mark.parametrize("variant", VARIANTS)
def test_triangle_example(variant):
    graph = Graph([Node(1, 2), Node(4, 6), Node(-3, 7)])
    tree = variant(graph)
    assert [e.ends for e in tree] == [(0, 1), (0, 2)]
    assert total_weight(tree) == 25 + 41


@pytest.mark.parametrize("variant", VARIANTS)
@pytest.mark.parametrize("n", [0, 1])
def test_trivial_graphs_have_empty_tree(variant, n):
    assert variant(_random_graph(n, 1)) == []


@pytest.mark.parametrize("variant", VARIANTS)
@pytest.mark.parametrize("n", [2, 5, 32, 60])
def test_result_is_a_spanning_tree(variant, n):
    graph = _random_graph(n, n)
    tree = variant(graph)
    assert len(tree) == n - 1
    sets = UnionFind(n)
    for edge in tree:
        a, b = sets.find(edge.first.id), sets.find(edge.second.id)
        assert a != b
        sets.union(a, b)
    assert len({sets.find(i) for i in range(n)}) == 1


@pytest.mark.parametrize("variant", VARIANTS)
def test_edges_come_in_nondecreasing_weight(variant):
    tree = variant(_random_graph(40, 9))
    weights = [e.weight for e in tree]
    assert weights == sorted(weights)


@pytest.mark.parametrize("seed", range(5))
def test_all_variants_agree_on_weight(seed):
    graph = _random_graph(50, seed)
    trees = [variant(graph) for variant in VARIANTS]
    assert same_weights(*trees)


@pytest.mark.parametrize("variant", VARIANTS)
def test_tree_is_no_heavier_than_a_path(variant):
    graph = _random_graph(30, 11)
    tree = variant(graph)
    weight_of = {e.ends: e.weight for e in graph.edges}
    path = [weight_of[(i, i + 1)] for i in range(29)]
    assert total_weight(tree) <= sum(path)


@pytest.mark.parametrize("variant", VARIANTS)
def test_unit_square_uses_only_sides(variant):
    graph = Graph([Node(0, 0), Node(1, 0), Node(0, 1), Node(1, 1)])
    tree = variant(graph)
    assert len(tree) == 3
    assert all(e.weight == 1 for e in tree)


@pytest.mark.parametrize("variant", VARIANTS)
def test_graph_is_left_unchanged(variant):
    graph = _random_graph(15, 4)
    before = list(graph.edges)
    variant(graph)
    assert graph.edges == before