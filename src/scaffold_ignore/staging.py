"""In-memory staging of project file writes and deletions.

Components never touch the disk directly. They stage writes and deletions
here, and the orchestrating harness decides when (and whether) to commit
them to a destination directory.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional

from scaffold_ignore.exceptions import StagingError

logger = logging.getLogger(__name__)

# Marker stored in the staging map for a pending deletion.
_DELETED = None


def normalize_path(path: str) -> str:
    """Return *path* as a relative POSIX path key.

    Raises:
        StagingError: If the path is empty, absolute or escapes the root.
    """
    raw = str(path).replace("\\", "/").strip()
    while raw.startswith("./"):
        raw = raw[2:]
    if not raw or raw == ".":
        raise StagingError(str(path), "path is empty")
    posix = PurePosixPath(raw)
    if posix.is_absolute() or (len(raw) > 1 and raw[1] == ":"):
        raise StagingError(str(path), "absolute paths cannot be staged")
    if ".." in posix.parts:
        raise StagingError(str(path), "path escapes the project root")
    return str(posix)


class StagedFileSystem:
    """Text files staged in memory, optionally backed by a root directory."""

    def __init__(self, root: Path | str | None = None):
        self.root = Path(root) if root is not None else None
        self._staged: Dict[str, Optional[str]] = {}

    def read(self, path: str) -> Optional[str]:
        """Return staged content for *path*, falling back to the disk copy.

        A staged deletion reads as ``None``, as does a file that exists
        nowhere.
        """
        key = normalize_path(path)
        if key in self._staged:
            return self._staged[key]
        if self.root is not None:
            on_disk = self.root / key
            if on_disk.is_file():
                return on_disk.read_text(encoding="utf-8")
        return None

    def exists(self, path: str) -> bool:
        return self.read(path) is not None

    def write(self, path: str, content: str) -> None:
        key = normalize_path(path)
        self._staged[key] = content
        logger.debug("Staged write of %s (%d chars)", key, len(content))

    def delete(self, path: str) -> None:
        key = normalize_path(path)
        self._staged[key] = _DELETED
        logger.debug("Staged deletion of %s", key)

    def pending(self) -> Dict[str, Optional[str]]:
        """Snapshot of staged changes; ``None`` values are deletions."""
        return dict(self._staged)

    def commit(self, root: Path | str | None = None) -> List[str]:
        """Apply staged changes under *root* (or the configured root).

        Returns:
            Committed paths in sorted order.

        Raises:
            StagingError: If no root directory is known.
        """
        target_root = Path(root) if root is not None else self.root
        if target_root is None:
            raise StagingError("<commit>", "no destination root to commit to")

        committed: List[str] = []
        for key in sorted(self._staged):
            content = self._staged[key]
            destination = target_root / key
            if content is _DELETED:
                if destination.exists():
                    destination.unlink()
                    logger.info("Deleted %s", destination)
                else:
                    logger.warning("Nothing to delete at %s", destination)
            else:
                destination.parent.mkdir(parents=True, exist_ok=True)
                destination.write_text(content, encoding="utf-8")
                logger.info("Wrote %s", destination)
            committed.append(key)

        self._staged.clear()
        return committed


__all__ = ["StagedFileSystem", "normalize_path"]
