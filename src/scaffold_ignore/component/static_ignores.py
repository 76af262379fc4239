"""Component that registers a fixed list of ignore paths."""

from __future__ import annotations

from typing import Iterable

from scaffold_ignore.generator import Generator


class StaticIgnores:
    """Register *paths* with the project builder during configure.

    Place it ahead of the gitignore component so its requests are visible
    when the ignore file is merged.
    """

    def __init__(self, paths: Iterable[str]):
        self.paths = list(paths)

    def init(self, generator: Generator) -> Generator:
        return generator

    def prompt(self, generator: Generator) -> Generator:
        return generator

    def configure(self, generator: Generator) -> Generator:
        for path in self.paths:
            generator.project_builder.ignore_file(path)
        return generator

    def __repr__(self) -> str:
        return f"StaticIgnores({self.paths!r})"
