"""Graph data model for storing import relationships."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, NamedTuple, Optional, Set


class NodeKind(str, Enum):
    """What a graph node stands for."""

    FILE = "file"
    FOLDER = "folder"
    DEPENDENCY = "dependency"


@dataclass
class Node:
    """
    A file, folder, or external dependency in the import graph.

    Files and folders are identified by their POSIX path relative to the
    project root; dependencies by the raw specifier or package name.
    """

    id: str
    kind: NodeKind
    imports: List[str] = field(default_factory=list)
    is_external: bool = False
    label: str = ""


class Edge(NamedTuple):
    """A directed 'source imports target' relation."""

    source: str
    target: str


class DependencyGraph:
    """
    A directed graph of import relationships.

    Nodes are keyed by id and keep their registration order. Edges are
    append-only: two import statements naming the same module produce two
    edges with the same endpoints.
    """

    def __init__(self):
        self._nodes: Dict[str, Node] = {}
        self._edges: List[Edge] = []

    @property
    def nodes(self) -> List[Node]:
        """Return all nodes in insertion order."""
        return list(self._nodes.values())

    @property
    def edges(self) -> List[Edge]:
        """Return all edges in insertion order."""
        return list(self._edges)

    def add_node(
        self,
        node_id: str,
        kind: NodeKind,
        is_external: bool = False,
    ) -> Node:
        """
        Register a node, or return the one already registered under node_id.

        The first registration wins: a later call with a different kind or
        is_external flag returns the existing node unchanged.

        Args:
            node_id: Relative path, specifier, or package name.
            kind: The kind of node.
            is_external: True when the node is not an entry of the project tree.

        Returns:
            The registered node.
        """
        existing = self._nodes.get(node_id)
        if existing is not None:
            return existing

        if kind is NodeKind.DEPENDENCY:
            label = node_id
        else:
            label = node_id.rstrip("/").rsplit("/", 1)[-1]

        node = Node(id=node_id, kind=kind, is_external=is_external, label=label)
        self._nodes[node_id] = node
        return node

    def add_edge(self, source: str, target: str) -> Edge:
        """Append a directed edge from source to target."""
        edge = Edge(source, target)
        self._edges.append(edge)
        return edge

    def get_node(self, node_id: str) -> Optional[Node]:
        """Get the node registered under node_id, if any."""
        return self._nodes.get(node_id)

    def get_targets(self, source: str) -> List[str]:
        """Get every target imported by source, one entry per edge."""
        return [edge.target for edge in self._edges if edge.source == source]

    def get_sources(self, target: str) -> Set[str]:
        """Get all nodes that import the target."""
        return {edge.source for edge in self._edges if edge.target == target}

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate over all edges in insertion order."""
        yield from self._edges

    def connected_ids(self) -> Set[str]:
        """Return the ids taking part in at least one edge, as source or target."""
        connected: Set[str] = set()
        for source, target in self._edges:
            connected.add(source)
            connected.add(target)
        return connected

    def prune(self) -> int:
        """
        Remove every node with no incident edge.

        Edges are never removed. Running prune on an already pruned graph
        removes nothing.

        Returns:
            The number of nodes removed.
        """
        connected = self.connected_ids()
        before = len(self._nodes)
        self._nodes = {
            node_id: node
            for node_id, node in self._nodes.items()
            if node_id in connected
        }
        return before - len(self._nodes)

    def dangling_edges(self) -> List[Edge]:
        """Return edges whose source or target is not a registered node."""
        return [
            edge for edge in self._edges
            if edge.source not in self._nodes or edge.target not in self._nodes
        ]

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __contains__(self, node_id: str) -> bool:
        """Check if a node id is registered."""
        return node_id in self._nodes

    def __repr__(self) -> str:
        counts = {kind: 0 for kind in NodeKind}
        for node in self._nodes.values():
            counts[node.kind] += 1
        return (
            f"DependencyGraph(nodes={len(self._nodes)}, edges={len(self._edges)}, "
            f"files={counts[NodeKind.FILE]}, folders={counts[NodeKind.FOLDER]}, "
            f"dependencies={counts[NodeKind.DEPENDENCY]})"
        )
