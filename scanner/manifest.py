"""Dependency manifest (package.json) reading."""

import json
import logging
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


MANIFEST_FILE = "package.json"


def read_manifest_dependencies(root: Path) -> List[str]:
    """
    Read the production dependency names declared at the project root.

    Only the keys of the top-level ``dependencies`` object are used; dev,
    peer and optional dependencies are left out.

    Args:
        root: Project root directory.

    Returns:
        Package names in manifest order. Empty when the manifest is missing,
        malformed, or declares no dependencies.
    """
    manifest = Path(root) / MANIFEST_FILE
    if not manifest.is_file():
        logger.debug(f"No {MANIFEST_FILE} under {root}")
        return []

    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring malformed manifest {manifest}: {e}")
        return []

    if not isinstance(data, dict):
        logger.warning(f"Ignoring manifest {manifest}: top level is not an object")
        return []

    dependencies = data.get("dependencies") or {}
    if not isinstance(dependencies, dict):
        logger.warning(f"Ignoring 'dependencies' in {manifest}: not an object")
        return []

    return list(dependencies)
