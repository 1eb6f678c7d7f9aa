"""Tests for graph data model."""

import pytest

from graph.model import DependencyGraph, Edge, NodeKind


class TestDependencyGraph:
    """Tests for DependencyGraph class."""

    def test_empty_graph(self):
        """Test empty graph initialization."""
        graph = DependencyGraph()
        assert len(graph) == 0
        assert graph.nodes == []
        assert graph.edges == []

    def test_add_node(self):
        """Test adding nodes."""
        graph = DependencyGraph()

        node = graph.add_node("src/app.ts", NodeKind.FILE)

        assert len(graph) == 1
        assert "src/app.ts" in graph
        assert node.kind is NodeKind.FILE
        assert node.imports == []
        assert node.is_external is False
        assert node.label == "app.ts"

    def test_add_node_first_registration_wins(self):
        """Test that re-registering an id keeps the first kind and flag."""
        graph = DependencyGraph()
        first = graph.add_node("react", NodeKind.DEPENDENCY, is_external=True)

        second = graph.add_node("react", NodeKind.FOLDER, is_external=False)

        assert second is first
        assert len(graph) == 1
        assert graph.get_node("react").kind is NodeKind.DEPENDENCY
        assert graph.get_node("react").is_external is True

    def test_dependency_label_is_specifier(self):
        """Test that dependency labels keep the whole specifier."""
        graph = DependencyGraph()

        node = graph.add_node("@scope/pkg/sub", NodeKind.DEPENDENCY, is_external=True)

        assert node.label == "@scope/pkg/sub"

    def test_add_edge_keeps_duplicates(self):
        """Test that edges are append-only and not deduplicated."""
        graph = DependencyGraph()
        graph.add_node("a.ts", NodeKind.FILE)
        graph.add_node("./util", NodeKind.DEPENDENCY, is_external=True)

        graph.add_edge("a.ts", "./util")
        graph.add_edge("a.ts", "./util")

        assert graph.edges == [Edge("a.ts", "./util"), Edge("a.ts", "./util")]
        assert graph.get_targets("a.ts") == ["./util", "./util"]

    def test_insertion_order(self):
        """Test that nodes and edges keep insertion order."""
        graph = DependencyGraph()
        for node_id in ["b.ts", "a.ts", "c.ts"]:
            graph.add_node(node_id, NodeKind.FILE)
        graph.add_edge("c.ts", "a.ts")
        graph.add_edge("b.ts", "a.ts")

        assert [node.id for node in graph.nodes] == ["b.ts", "a.ts", "c.ts"]
        assert list(graph.iter_edges()) == [Edge("c.ts", "a.ts"), Edge("b.ts", "a.ts")]

    def test_get_sources(self):
        """Test getting sources that import a target."""
        graph = DependencyGraph()
        graph.add_edge("a.ts", "react")
        graph.add_edge("b.ts", "react")
        graph.add_edge("b.ts", "lodash")

        assert graph.get_sources("react") == {"a.ts", "b.ts"}
        assert graph.get_sources("lodash") == {"b.ts"}

    def test_accessors_return_copies(self):
        """Test that modifying returned lists does not affect the graph."""
        graph = DependencyGraph()
        graph.add_node("a.ts", NodeKind.FILE)

        graph.nodes.clear()
        graph.edges.append(Edge("x", "y"))

        assert len(graph) == 1
        assert graph.edges == []

    def test_repr(self):
        """Test string representation."""
        graph = DependencyGraph()
        graph.add_node("src", NodeKind.FOLDER)
        graph.add_node("src/a.ts", NodeKind.FILE)
        graph.add_node("react", NodeKind.DEPENDENCY, is_external=True)
        graph.add_edge("src/a.ts", "react")

        text = repr(graph)

        assert "nodes=3" in text
        assert "edges=1" in text
        assert "folders=1" in text


class TestPruning:
    """Tests for orphan pruning and the edge invariant."""

    @pytest.fixture
    def graph(self):
        graph = DependencyGraph()
        graph.add_node("src", NodeKind.FOLDER)
        graph.add_node("src/a.ts", NodeKind.FILE)
        graph.add_node("src/lonely.ts", NodeKind.FILE)
        graph.add_node("./b", NodeKind.DEPENDENCY, is_external=True)
        graph.add_node("unused-pkg", NodeKind.DEPENDENCY, is_external=True)
        graph.add_edge("src/a.ts", "./b")
        return graph

    def test_prune_removes_unconnected(self, graph):
        """Test that nodes without edges are removed."""
        removed = graph.prune()

        assert removed == 3
        assert [node.id for node in graph.nodes] == ["src/a.ts", "./b"]

    def test_prune_keeps_edges(self, graph):
        """Test that pruning never removes edges."""
        graph.prune()

        assert graph.edges == [Edge("src/a.ts", "./b")]

    def test_prune_is_idempotent(self, graph):
        """Test that pruning twice gives the same node set."""
        graph.prune()
        first = [node.id for node in graph.nodes]

        removed = graph.prune()

        assert removed == 0
        assert [node.id for node in graph.nodes] == first

    def test_prune_without_edges_empties_graph(self):
        """Test that a graph with no edges prunes to zero nodes."""
        graph = DependencyGraph()
        graph.add_node("a.ts", NodeKind.FILE)
        graph.add_node("lib", NodeKind.FOLDER)

        graph.prune()

        assert len(graph) == 0

    def test_dangling_edges(self):
        """Test detection of edges pointing at unregistered nodes."""
        graph = DependencyGraph()
        graph.add_node("a.ts", NodeKind.FILE)
        graph.add_edge("a.ts", "react")

        assert graph.dangling_edges() == [Edge("a.ts", "react")]

        graph.add_node("react", NodeKind.DEPENDENCY, is_external=True)

        assert graph.dangling_edges() == []
