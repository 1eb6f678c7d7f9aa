"""Gitignore-style path filtering."""

import logging
from pathlib import Path
from typing import Iterable

import pathspec

logger = logging.getLogger(__name__)


GITIGNORE_FILE = ".gitignore"

# Skipped whatever the pattern file says
ALWAYS_IGNORED = {"node_modules", ".git"}


class IgnoreMatcher:
    """
    Decide whether a path relative to the project root is excluded.

    Patterns follow gitignore semantics (negation, directory-only patterns,
    wildcards, anchoring). Paths are matched in forward-slash form whatever
    the host separator is.
    """

    def __init__(self, patterns: Iterable[str] = ()):
        self.patterns = list(patterns)
        self._spec = pathspec.GitIgnoreSpec.from_lines(self.patterns)

    @classmethod
    def from_root(cls, root: Path) -> "IgnoreMatcher":
        """
        Load the ignore file found at the project root.

        A missing file means no patterns.
        """
        gitignore = Path(root) / GITIGNORE_FILE
        if not gitignore.is_file():
            logger.debug(f"No {GITIGNORE_FILE} under {root}")
            return cls()

        try:
            content = gitignore.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning(f"Could not read {gitignore}: {e}")
            return cls()

        return cls(content.splitlines())

    def should_ignore(self, relative_path: str, is_dir: bool = False) -> bool:
        """
        Check whether a path is excluded from traversal.

        Args:
            relative_path: Path relative to the project root.
            is_dir: True if the path is a directory, so that directory-only
                    patterns such as ``dist/`` apply to it.

        Returns:
            True if the path is ignored.
        """
        normalized = _normalize(relative_path)
        if not normalized:
            return False

        if any(part in ALWAYS_IGNORED for part in normalized.split("/")):
            return True

        if is_dir:
            normalized += "/"
        return self._spec.match_file(normalized)

    def __repr__(self) -> str:
        return f"IgnoreMatcher(patterns={len(self.patterns)})"


def _normalize(relative_path: str) -> str:
    """Convert a relative path to the slash-separated form patterns expect."""
    normalized = str(relative_path).replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized.strip("/")
