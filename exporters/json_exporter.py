"""JSON exporter for import graphs (the renderer-facing format)."""

import json
from typing import Any, Dict, List

from graph.model import DependencyGraph


def to_dict(graph: DependencyGraph) -> Dict[str, Any]:
    """
    Convert an import graph to a JSON-compatible structure.

    Nodes and edges keep their insertion order. Duplicate edges are kept.

    Args:
        graph: The import graph to export.

    Returns:
        ``{"nodes": [...], "edges": [...]}`` dictionary.
    """
    nodes: List[Dict[str, Any]] = []
    for node in graph.nodes:
        nodes.append({
            "id": node.id,
            "kind": node.kind.value,
            "imports": list(node.imports),
            "isExternal": node.is_external,
            "label": node.label,
        })

    edges: List[Dict[str, str]] = []
    for source, target in graph.iter_edges():
        edges.append({"source": source, "target": target})

    return {
        "nodes": nodes,
        "edges": edges,
    }


def to_json(graph: DependencyGraph, indent: int = 2) -> str:
    """Convert an import graph to a JSON string."""
    return json.dumps(to_dict(graph), indent=indent)
