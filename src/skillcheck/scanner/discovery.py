"""Discovery — find skill descriptor files under a path."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# Dependency directories that never hold skill descriptors.
# Hidden directories (leading dot) are skipped as well.
_SKIP_DIRS = {
    "node_modules",
    "__pycache__",
    "venv",
}


def find_skill_files(path: str | Path, suffix: str = ".md") -> list[str]:
    """Return sorted absolute paths of files ending in ``suffix``.

    A file path is returned as-is (resolved). Directories are walked
    recursively; unreadable subtrees are skipped.
    """
    root = Path(path)
    if not root.exists():
        raise FileNotFoundError(f"No such file or directory: {path}")
    if root.is_file():
        return [str(root.resolve())]

    suffix = suffix.lower()
    found: list[str] = []

    def _on_error(error: OSError) -> None:
        logger.debug("Skipping %s: %s", error.filename, error)

    for current, dirs, files in os.walk(root.resolve(), onerror=_on_error):
        # Prune skipped directories in-place
        dirs[:] = [
            d
            for d in dirs
            if not d.startswith(".")
            and d not in _SKIP_DIRS
            and not d.endswith(".egg-info")
        ]
        for name in files:
            if name.lower().endswith(suffix):
                found.append(str(Path(current) / name))

    return sorted(found)
