"""scaffold-ignore: .gitignore management for project scaffolding generators."""

from scaffold_ignore.actions import DeleteAction, FileAction, WriteAction
from scaffold_ignore.component import StaticIgnores, gitignore
from scaffold_ignore.component.gitignore import (
    GITIGNORE_PATH,
    decide_file_action,
    merge_ignore_lines,
)
from scaffold_ignore.exceptions import (
    PromptUnavailableError,
    ScaffoldConfigError,
    ScaffoldError,
    StagingError,
)
from scaffold_ignore.generator import Generator, GeneratorConfig, Phase, run_generation
from scaffold_ignore.project_builder import IncludedFile, ProjectBuilder
from scaffold_ignore.staging import StagedFileSystem

__version__ = "0.1.0"

__all__ = [
    "DeleteAction",
    "FileAction",
    "GITIGNORE_PATH",
    "Generator",
    "GeneratorConfig",
    "IncludedFile",
    "Phase",
    "ProjectBuilder",
    "PromptUnavailableError",
    "ScaffoldConfigError",
    "ScaffoldError",
    "StagedFileSystem",
    "StagingError",
    "StaticIgnores",
    "WriteAction",
    "decide_file_action",
    "gitignore",
    "merge_ignore_lines",
    "run_generation",
]
