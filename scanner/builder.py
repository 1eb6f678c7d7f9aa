"""Graph builder that orchestrates scanning and graph construction."""

import logging
from pathlib import Path
from typing import Optional, Set, Union

from graph.model import DependencyGraph, NodeKind
from .discovery import iter_entries
from .ignore import IgnoreMatcher
from .manifest import read_manifest_dependencies
from .parser import SOURCE_EXTENSIONS, extract_imports, read_source

logger = logging.getLogger(__name__)


class RootNotFoundError(FileNotFoundError):
    """Raised when the project root is not an existing directory."""


def build_graph(
    root: Union[str, Path],
    include_ext: Optional[Set[str]] = None,
    max_depth: Optional[int] = None,
    prune: bool = True,
    include_manifest: bool = True,
) -> DependencyGraph:
    """
    Scan a project and build its import graph.

    Every call works on a fresh graph. Specifiers are recorded exactly as
    written, so ``./util`` and ``../lib/util`` naming the same file end up
    as two distinct dependency nodes.

    Args:
        root: Project root directory.
        include_ext: File extensions to parse (default: .js, .jsx, .ts, .tsx).
        max_depth: Maximum directory depth to scan.
        prune: If True, drop nodes that take part in no edge. Folder nodes
               and unconnected files disappear, and a graph without edges
               ends up empty.
        include_manifest: If True, register the dependencies declared in
                          package.json as dependency nodes.

    Returns:
        DependencyGraph of the project.

    Raises:
        RootNotFoundError: If root is not an existing directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise RootNotFoundError(f"'{root}' is not a directory")

    if include_ext is None:
        include_ext = SOURCE_EXTENSIONS

    graph = DependencyGraph()
    matcher = IgnoreMatcher.from_root(root)
    files = 0

    for entry in iter_entries(root, matcher=matcher, max_depth=max_depth):
        if entry.is_dir:
            graph.add_node(entry.relative, NodeKind.FOLDER)
            continue

        if entry.path.suffix.lower() not in include_ext:
            continue

        source = read_source(entry.path)
        if source is None:
            continue

        imports = extract_imports(source, entry.path)
        node = graph.add_node(entry.relative, NodeKind.FILE)
        if node.kind is NodeKind.FILE:
            node.imports = imports
        else:
            logger.debug(f"{entry.relative} already registered as {node.kind.value}")
        files += 1

        for specifier in imports:
            graph.add_node(specifier, NodeKind.DEPENDENCY, is_external=True)
            graph.add_edge(entry.relative, specifier)

    if include_manifest:
        for name in read_manifest_dependencies(root):
            graph.add_node(name, NodeKind.DEPENDENCY, is_external=True)

    if prune:
        removed = graph.prune()
        logger.debug(f"Pruned {removed} unconnected nodes")

    dangling = graph.dangling_edges()
    if dangling:
        raise RuntimeError(f"Graph has dangling edges: {dangling[:5]}")

    logger.info(f"Scanned {files} source files under {root}: {graph!r}")
    return graph
