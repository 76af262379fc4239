"""Project builder: the shared registry of files to include, exclude and ignore.

One builder lives on each generator handle. Components register paths that
should be ignored by version control and stage the files they want included
in (or removed from) the generated project. The run harness calls
:meth:`ProjectBuilder.clear` once at the start of every generation run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from scaffold_ignore.staging import StagedFileSystem, normalize_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IncludedFile:
    """A file staged for inclusion in the generated project."""

    to: str
    """Destination path relative to the project root"""

    content: str
    """Full text content to write"""


class ProjectBuilder:
    """Collects ignore requests and staged includes/excludes for one run."""

    def __init__(self) -> None:
        self._ignored: List[str] = []
        self._included: List[IncludedFile] = []
        self._excluded: List[str] = []

    def ignore_file(self, path: str) -> None:
        """Flag *path* as one that version control should ignore."""
        self._ignored.append(path)
        logger.debug("Registered ignore request for %s", path)

    def ignored_files(self) -> List[str]:
        """Registered ignore paths, in registration order."""
        return list(self._ignored)

    def write_file(self, to: str, content: str) -> None:
        """Stage *content* for *to*, replacing any earlier include or exclude."""
        key = normalize_path(to)
        self._included = [f for f in self._included if f.to != key]
        if key in self._excluded:
            self._excluded.remove(key)
        self._included.append(IncludedFile(to=key, content=content))

    def remove_file(self, path: str) -> None:
        """Stage the removal of *path*, dropping any pending include for it."""
        key = normalize_path(path)
        self._included = [f for f in self._included if f.to != key]
        if key not in self._excluded:
            self._excluded.append(key)

    def included_files(self) -> List[IncludedFile]:
        return list(self._included)

    def excluded_files(self) -> List[str]:
        return list(self._excluded)

    def apply(self, fs: StagedFileSystem) -> None:
        """Forward staged includes and excludes to the staging file system."""
        for included in self._included:
            fs.write(included.to, included.content)
        for path in self._excluded:
            fs.delete(path)

    def clear(self) -> None:
        """Forget every ignore request, include and exclude."""
        self._ignored.clear()
        self._included.clear()
        self._excluded.clear()


__all__ = ["IncludedFile", "ProjectBuilder"]
