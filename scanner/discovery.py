"""Directory traversal for scanning project trees."""

import logging
import os
from pathlib import Path
from typing import Iterator, List, NamedTuple, Optional, Set

from .ignore import IgnoreMatcher

logger = logging.getLogger(__name__)


class Entry(NamedTuple):
    """A filesystem entry met during traversal."""

    path: Path
    relative: str
    is_dir: bool


def iter_entries(
    root: Path,
    matcher: Optional[IgnoreMatcher] = None,
    max_depth: Optional[int] = None,
) -> Iterator[Entry]:
    """
    Walk a directory tree depth-first, yielding every non-ignored entry.

    Entries of a directory are visited in name order, and a directory is
    yielded right before its own contents. Ignored directories are not
    descended into. Symlinked directories are followed, but each real
    directory is entered at most once, so symlink cycles terminate.

    Args:
        root: Root directory to scan.
        matcher: Ignore rules; None ignores nothing beyond the built-in names.
        max_depth: Maximum depth to descend. None means unlimited.

    Yields:
        Entry tuples with the relative path in forward-slash form.
    """
    if matcher is None:
        matcher = IgnoreMatcher()

    root = Path(root)
    visited: Set[Path] = {root.resolve()}
    stack: List[Iterator[Path]] = [iter(_list_dir(root))]

    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        relative = entry.relative_to(root).as_posix()
        is_dir = entry.is_dir()

        if matcher.should_ignore(relative, is_dir=is_dir):
            logger.debug(f"Ignoring {relative}")
            continue

        if is_dir:
            real = entry.resolve()
            if real in visited:
                logger.debug(f"Skipping {relative}: {real} already visited")
                continue
            visited.add(real)

            yield Entry(entry, relative, True)

            if max_depth is None or len(stack) <= max_depth:
                stack.append(iter(_list_dir(entry)))
        elif entry.is_file():
            yield Entry(entry, relative, False)


def _list_dir(directory: Path) -> List[Path]:
    """List a directory sorted by name; unlistable directories yield nothing."""
    try:
        with os.scandir(directory) as it:
            names = sorted(item.name for item in it)
    except OSError as e:
        logger.warning(f"Cannot list {directory}: {e}")
        return []
    return [directory / name for name in names]
