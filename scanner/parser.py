"""Import extraction from JavaScript and TypeScript sources."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

from tree_sitter import Parser
from tree_sitter_language_pack import get_parser

logger = logging.getLogger(__name__)


# Grammar used for each source file extension
DIALECTS = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".tsx": "tsx",
}

SOURCE_EXTENSIONS = set(DIALECTS)


def dialect_for(file_path: Union[str, Path]) -> Optional[str]:
    """Return the grammar name for a file, or None if it is not a source file."""
    return DIALECTS.get(Path(file_path).suffix.lower())


@lru_cache(maxsize=None)
def _parser_for(dialect: str) -> Parser:
    return get_parser(dialect)


def read_source(file_path: Path) -> Optional[str]:
    """
    Read a source file as UTF-8 text.

    Args:
        file_path: Path to the file to read.

    Returns:
        The file contents, or None if the file cannot be read. Bytes that
        are not valid UTF-8 are replaced rather than rejected.
    """
    try:
        return file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning(f"Skipping unreadable file {file_path}: {e}")
        return None


def extract_imports(source_text: str, file_path: Union[str, Path]) -> List[str]:
    """
    Extract the module specifiers of every static import declaration.

    The grammar is picked from the file extension. Specifiers come back in
    source order, duplicates included. Side-effect imports (``import './x'``)
    and type-only imports count; dynamic ``import()``, ``require()`` and
    ``export ... from`` re-exports do not.

    Args:
        source_text: The source code.
        file_path: Path of the file, used to choose the grammar.

    Returns:
        List of raw specifiers. Empty if the file has a syntax error or is
        not a JavaScript/TypeScript source.
    """
    dialect = dialect_for(file_path)
    if dialect is None:
        return []

    tree = _parser_for(dialect).parse(source_text.encode("utf-8"))
    root = tree.root_node
    if root.has_error:
        logger.debug(f"Syntax error in {file_path}, no imports recorded")
        return []

    imports: List[str] = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "import_statement":
            specifier = _import_source(node)
            if specifier is not None:
                imports.append(specifier)
            continue
        stack.extend(reversed(node.children))

    return imports


def _import_source(node) -> Optional[str]:
    """Return the specifier of an import_statement node, quotes removed."""
    source = node.child_by_field_name("source")
    if source is None or source.type != "string":
        # e.g. TypeScript `import fs = require("fs")`
        return None
    return source.text.decode("utf-8")[1:-1]
