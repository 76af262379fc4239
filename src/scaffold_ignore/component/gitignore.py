"""Generator component that owns the project's ``.gitignore``.

The existing ``.gitignore`` (if one is staged or on disk) is merged with
every path other components registered through
:meth:`ProjectBuilder.ignore_file`. The result is trimmed, stripped of
blank and comment lines, deduplicated and sorted. An empty result removes
the file instead of writing an empty one.

Lines are split on every line boundary, whether they come from the file
or from a registered path, and a leading byte-order mark is dropped with
the surrounding whitespace. Sorting is by Unicode code point, so lines that
mix characters outside the Basic Multilingual Plane with ones above U+E000
order differently than a UTF-16 code-unit sort would.

Only the configure phase does any work; init and prompt return the
generator untouched.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from scaffold_ignore.actions import DeleteAction, FileAction, WriteAction
from scaffold_ignore.generator import Generator, Phase

logger = logging.getLogger(__name__)

GITIGNORE_PATH = ".gitignore"

_BOM = "\ufeff"


def merge_ignore_lines(existing_content: Optional[str], registered_paths: Iterable[str]) -> List[str]:
    """Combine an existing ignore file with registered paths.

    Args:
        existing_content: Raw text of the current ignore file, or None.
        registered_paths: Paths flagged for ignoring by other components.

    Returns:
        Unique, trimmed, non-comment lines in ascending order.
    """
    candidates: List[str] = existing_content.splitlines() if existing_content is not None else []
    for path in registered_paths:
        candidates.extend(path.splitlines())

    unique = set()
    for line in candidates:
        stripped = line.strip().strip(_BOM).strip()
        if not stripped or stripped.startswith("#"):
            continue
        unique.add(stripped)
    return sorted(unique)


def decide_file_action(target_path: str, merged_lines: Sequence[str]) -> FileAction:
    """Write *merged_lines* to *target_path*, or delete it when there are none."""
    if merged_lines:
        return WriteAction(path=target_path, content="\n".join(merged_lines))
    return DeleteAction(path=target_path)


def init(generator: Generator) -> Generator:
    return generator


def prompt(generator: Generator) -> Generator:
    return generator


def configure(generator: Generator) -> Generator:
    """Stage the merged ``.gitignore`` (or its removal) on the project builder."""
    builder = generator.project_builder
    existing = generator.fs.read(GITIGNORE_PATH)
    registered = builder.ignored_files()

    merged = merge_ignore_lines(existing, registered)
    action = decide_file_action(GITIGNORE_PATH, merged)
    logger.debug(
        "Merged %d registered path(s) into %s: %d line(s), action=%s",
        len(registered),
        GITIGNORE_PATH,
        len(merged),
        action.kind,
    )

    if isinstance(action, WriteAction):
        builder.write_file(action.path, action.content)
    else:
        builder.remove_file(action.path)
    return generator


_PHASES: Dict[Phase, Callable[[Generator], Generator]] = {
    Phase.INIT: init,
    Phase.PROMPT: prompt,
    Phase.CONFIGURE: configure,
}


def run_phase(phase: Phase | str, generator: Generator) -> Generator:
    """Dispatch *generator* to the named lifecycle phase."""
    return _PHASES[Phase(phase)](generator)


__all__ = [
    "GITIGNORE_PATH",
    "configure",
    "decide_file_action",
    "init",
    "merge_ignore_lines",
    "prompt",
    "run_phase",
]
