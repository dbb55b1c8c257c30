"""
Tests for ontologyinsight.builders.weighted_graph.
"""

import math
import random

import networkx as nx
import pytest

from ontologyinsight.builders import UNREACHABLE, DuplicateIdError, SelfEdgeError, WeightedGraph


@pytest.fixture
def chain_graph():
    """A - B - C，每條邊各插入一次。"""
    graph = WeightedGraph()
    graph.add_edge("A", "B")
    graph.add_edge("B", "C")
    return graph


class TestAddEdge:
    """add_edge() 的測試。"""

    def test_creates_endpoints_lazily(self, chain_graph):
        assert chain_graph.size() == 3
        assert chain_graph.get_nodes_ids() == ["A", "B", "C"]

    def test_neighbors_are_symmetric(self, chain_graph):
        assert chain_graph.get_node("A").neighbors == {"B": 1}
        assert chain_graph.get_node("B").neighbors == {"A": 1, "C": 1}
        assert chain_graph.get_node("C").neighbors == {"B": 1}

    def test_repeated_edge_increments_weight_both_ways(self, chain_graph):
        chain_graph.add_edge("B", "A")
        chain_graph.add_edge("A", "B")

        assert chain_graph.get_node("A").neighbors["B"] == 3
        assert chain_graph.get_node("B").neighbors["A"] == 3

    def test_self_edge_rejected_without_side_effects(self):
        graph = WeightedGraph()
        with pytest.raises(SelfEdgeError) as exc_info:
            graph.add_edge("A", "A")

        assert exc_info.value.node_id == "A"
        assert graph.size() == 0

    def test_identifier_is_applied_to_records(self):
        graph = WeightedGraph(identifier=lambda record: record["id"])
        graph.add_edge({"id": 1, "label": "one"}, {"id": 2})
        graph.add_edge({"id": 1}, {"id": 2})

        node = graph.get_node(1)
        assert node.payload == {"id": 1, "label": "one"}
        assert node.neighbors == {2: 2}

    def test_duplicate_create_raises(self):
        graph = WeightedGraph()
        graph.create_node("A")
        with pytest.raises(DuplicateIdError):
            graph.create_node("A")

    def test_clear(self, chain_graph):
        chain_graph.clear()
        assert chain_graph.size() == 0
        assert chain_graph.get_node("A") is None


class TestCompile:
    """compile() 的測試。"""

    def test_chain_distances(self, chain_graph):
        result = chain_graph.compile()

        assert result.ids == ["A", "B", "C"]
        assert result.distance("A", "B") == 1
        assert result.distance("A", "C") == 2
        assert result.distance("C", "A") == 2

    def test_weight_is_multiplicity(self, chain_graph):
        chain_graph.add_edge("A", "B")
        result = chain_graph.compile()

        assert result.distance("A", "B") == 2
        assert result.distance("A", "C") == 3

    def test_lighter_detour_wins(self):
        graph = WeightedGraph()
        for _ in range(3):
            graph.add_edge("A", "B")
        graph.add_edge("A", "C")
        graph.add_edge("C", "B")

        assert graph.compile().distance("A", "B") == 2

    def test_isolated_node_is_unreachable(self, chain_graph):
        chain_graph.create_node("Z")
        result = chain_graph.compile()
        z = result.index_of("Z")

        for i in range(len(result.ids)):
            expected = 0 if i == z else UNREACHABLE
            assert result.matrix[z][i] == expected
            assert result.matrix[i][z] == expected

    def test_empty_graph(self):
        result = WeightedGraph().compile()
        assert result.to_dict() == {"ids": [], "matrix": []}

    def test_to_dict(self, chain_graph):
        assert chain_graph.compile().to_dict() == {
            "ids": ["A", "B", "C"],
            "matrix": [[0, 1, 2], [1, 0, 1], [2, 1, 0]],
        }

    def test_matches_networkx_on_random_graphs(self):
        rng = random.Random(42)
        graph = WeightedGraph()
        reference = nx.Graph()
        nodes = list(range(25))
        for node in nodes:
            graph.create_node(node)
            reference.add_node(node)

        for _ in range(40):
            u, v = rng.sample(nodes, 2)
            graph.add_edge(u, v)
            weight = reference.edges[u, v]["weight"] + 1 if reference.has_edge(u, v) else 1
            reference.add_edge(u, v, weight=weight)

        result = graph.compile()
        expected = nx.floyd_warshall(reference, weight="weight")

        for i, u in enumerate(result.ids):
            assert result.matrix[i][i] == 0
            for j, v in enumerate(result.ids):
                assert result.matrix[i][j] == result.matrix[j][i]
                if math.isinf(expected[u][v]):
                    assert result.matrix[i][j] == UNREACHABLE
                else:
                    assert result.matrix[i][j] == expected[u][v]

    def test_distances_are_integers(self, chain_graph):
        for row in chain_graph.compile().matrix:
            assert all(isinstance(d, int) for d in row)

    def test_compile_returns_fresh_matrix(self, chain_graph):
        first = chain_graph.compile()
        first.matrix[0][1] = 99
        assert chain_graph.compile().distance("A", "B") == 1
