"""Scanner module for traversal, import extraction, and graph building."""

from .discovery import iter_entries
from .ignore import IgnoreMatcher
from .manifest import read_manifest_dependencies
from .parser import extract_imports, read_source
from .builder import build_graph, RootNotFoundError

__all__ = [
    "iter_entries",
    "IgnoreMatcher",
    "read_manifest_dependencies",
    "extract_imports",
    "read_source",
    "build_graph",
    "RootNotFoundError",
]
