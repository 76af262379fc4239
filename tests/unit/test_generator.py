"""Tests for the generator handle and run harness."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from scaffold_ignore.actions import DeleteAction, WriteAction
from scaffold_ignore.component import StaticIgnores, gitignore
from scaffold_ignore.exceptions import PromptUnavailableError
from scaffold_ignore.generator import Generator, GeneratorConfig, Phase, run_generation


class TestGeneratorConfig:
    def test_defaults_do_not_override(self) -> None:
        config = GeneratorConfig({"name": "demo"})
        config.defaults({"name": "other", "license": "MIT"})
        assert config.all() == {"name": "demo", "license": "MIT"}

    def test_get_and_set(self) -> None:
        config = GeneratorConfig()
        assert config.get("missing", "fallback") == "fallback"
        config.set("name", "demo")
        assert config.get("name") == "demo"


class TestGeneratorPrompt:
    def test_without_prompter_raises(self) -> None:
        with pytest.raises(PromptUnavailableError):
            Generator().prompt([{"name": "project"}])

    def test_delegates_to_prompter(self) -> None:
        prompter = MagicMock(return_value={"project": "demo"})
        generator = Generator(prompter=prompter)
        questions = [{"name": "project"}]
        assert generator.prompt(questions) == {"project": "demo"}
        prompter.assert_called_once_with(questions)


def test_phase_order() -> None:
    assert [phase.value for phase in Phase] == ["init", "prompt", "configure"]


class TestRunGeneration:
    def test_runs_phases_across_components_in_order(self, generator: Generator) -> None:
        calls: list[tuple[str, str]] = []

        class Recorder:
            def __init__(self, name: str):
                self.name = name

            def init(self, gen):
                calls.append((self.name, "init"))
                return gen

            def prompt(self, gen):
                calls.append((self.name, "prompt"))
                return gen

            def configure(self, gen):
                calls.append((self.name, "configure"))
                return gen

        run_generation(generator, [Recorder("a"), Recorder("b")])

        assert calls == [
            ("a", "init"), ("b", "init"),
            ("a", "prompt"), ("b", "prompt"),
            ("a", "configure"), ("b", "configure"),
        ]

    def test_static_ignores_feed_gitignore(self, generator: Generator) -> None:
        generator.fs.write(".gitignore", "# project\nnode_modules\n")
        actions = run_generation(generator, [StaticIgnores(["dist/", "node_modules"]), gitignore])

        assert actions == [WriteAction(path=".gitignore", content="dist/\nnode_modules")]
        assert generator.fs.read(".gitignore") == "dist/\nnode_modules"

    def test_clears_registry_between_runs(self, generator: Generator) -> None:
        generator.project_builder.ignore_file("leftover")
        generator.project_builder.write_file("stale.txt", "x")

        actions = run_generation(generator, [gitignore])

        assert actions == [DeleteAction(path=".gitignore")]
        assert generator.project_builder.ignored_files() == []
        assert generator.fs.pending() == {".gitignore": None}

    def test_commit_after_run(self, project_dir: Path) -> None:
        (project_dir / ".gitignore").write_text("b\na\n", encoding="utf-8")
        generator = Generator(destination_root=project_dir)

        run_generation(generator, [StaticIgnores(["c"]), gitignore])
        generator.fs.commit()

        assert (project_dir / ".gitignore").read_text(encoding="utf-8") == "a\nb\nc"

    def test_commit_drops_comment_behind_byte_order_mark(self, project_dir: Path) -> None:
        (project_dir / ".gitignore").write_bytes(b"\xef\xbb\xbf# Logs\nlogs\n")
        generator = Generator(destination_root=project_dir)

        run_generation(generator, [gitignore])
        generator.fs.commit()

        assert (project_dir / ".gitignore").read_text(encoding="utf-8") == "logs"

    def test_commit_removes_empty_gitignore(self, project_dir: Path) -> None:
        (project_dir / ".gitignore").write_text("# nothing here\n", encoding="utf-8")
        generator = Generator(destination_root=project_dir)

        run_generation(generator, [gitignore])
        generator.fs.commit()

        assert not (project_dir / ".gitignore").exists()


class TestStaticIgnores:
    def test_registers_only_on_configure(self, generator: Generator) -> None:
        component = StaticIgnores(["dist"])
        component.init(generator)
        component.prompt(generator)
        assert generator.project_builder.ignored_files() == []

        assert component.configure(generator) is generator
        assert generator.project_builder.ignored_files() == ["dist"]
