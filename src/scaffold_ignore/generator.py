"""Generator handle and the generation-run harness.

The generator is the opaque context threaded through every component phase.
It owns the staging file system, the project builder, an in-memory config
store and an optional prompter. :func:`run_generation` drives a list of
components through the init, prompt and configure phases in order.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Sequence

from scaffold_ignore.actions import DeleteAction, FileAction, WriteAction
from scaffold_ignore.exceptions import PromptUnavailableError
from scaffold_ignore.project_builder import ProjectBuilder
from scaffold_ignore.staging import StagedFileSystem

logger = logging.getLogger(__name__)

Prompter = Callable[[Sequence[Mapping[str, Any]]], Dict[str, Any]]


class Phase(str, Enum):
    """Lifecycle phases, in the order the harness runs them."""

    INIT = "init"
    PROMPT = "prompt"
    CONFIGURE = "configure"


class GeneratorConfig:
    """Key/value answers collected during a run. Nothing is persisted."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})

    def defaults(self, values: Mapping[str, Any]) -> None:
        """Set each key in *values* that has no value yet."""
        for key, value in values.items():
            self._values.setdefault(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def all(self) -> Dict[str, Any]:
        return dict(self._values)


class Generator:
    """Context handle passed to, and returned by, every component phase."""

    def __init__(
        self,
        destination_root: Path | str | None = None,
        fs: Optional[StagedFileSystem] = None,
        project_builder: Optional[ProjectBuilder] = None,
        config: Optional[GeneratorConfig] = None,
        prompter: Optional[Prompter] = None,
    ):
        self.destination_root = Path(destination_root) if destination_root is not None else None
        self.fs = fs if fs is not None else StagedFileSystem(self.destination_root)
        self.project_builder = project_builder if project_builder is not None else ProjectBuilder()
        self.config = config if config is not None else GeneratorConfig()
        self._prompter = prompter

    def prompt(self, questions: Sequence[Mapping[str, Any]]) -> Dict[str, Any]:
        """Ask *questions* through the injected prompter.

        Raises:
            PromptUnavailableError: If the generator was built without one.
        """
        if self._prompter is None:
            raise PromptUnavailableError()
        return self._prompter(questions)


class Component(Protocol):
    """Anything exposing the three lifecycle phases."""

    def init(self, generator: Generator) -> Generator: ...

    def prompt(self, generator: Generator) -> Generator: ...

    def configure(self, generator: Generator) -> Generator: ...


def staged_actions(project_builder: ProjectBuilder) -> List[FileAction]:
    """Describe the builder's staged work as file actions, writes first."""
    actions: List[FileAction] = [
        WriteAction(path=included.to, content=included.content)
        for included in project_builder.included_files()
    ]
    actions.extend(DeleteAction(path=path) for path in project_builder.excluded_files())
    return actions


def run_generation(generator: Generator, components: Sequence[Component]) -> List[FileAction]:
    """Run *components* through every phase and stage their output.

    The project builder is cleared first so that ignore requests from a
    previous run never leak into this one. Staged actions are applied to
    ``generator.fs``; committing them to disk is left to the caller.
    """
    generator.project_builder.clear()

    for phase in Phase:
        logger.debug("Running %s phase for %d component(s)", phase.value, len(components))
        for component in components:
            generator = getattr(component, phase.value)(generator)

    actions = staged_actions(generator.project_builder)
    generator.project_builder.apply(generator.fs)
    logger.debug("Generation run staged %d action(s)", len(actions))
    return actions


__all__ = [
    "Component",
    "Generator",
    "GeneratorConfig",
    "Phase",
    "Prompter",
    "run_generation",
    "staged_actions",
]
