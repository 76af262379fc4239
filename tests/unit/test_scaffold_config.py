"""Scaffold config parsing and validation tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from scaffold_ignore.config import ScaffoldConfig, load_scaffold_config, save_scaffold_config
from scaffold_ignore.exceptions import ScaffoldConfigError


def _write_config(tmp_path: Path, content: str) -> Path:
    scaffold = tmp_path / ".scaffold"
    scaffold.mkdir(parents=True, exist_ok=True)
    config_file = scaffold / "config.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_scaffold_config(tmp_path) == ScaffoldConfig()


def test_loads_ignore_list(tmp_path: Path) -> None:
    _write_config(tmp_path, "gitignore:\n  ignore:\n    - node_modules\n    - '.tox'\n")
    assert load_scaffold_config(tmp_path).ignore == ["node_modules", ".tox"]


def test_single_string_becomes_list(tmp_path: Path) -> None:
    _write_config(tmp_path, "gitignore:\n  ignore: dist\n")
    assert load_scaffold_config(tmp_path).ignore == ["dist"]


def test_empty_file(tmp_path: Path) -> None:
    _write_config(tmp_path, "")
    assert load_scaffold_config(tmp_path).ignore == []


class TestInvalidConfig:
    def test_corrupt_yaml_clear_error(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "invalid: yaml: content: [")

        with pytest.raises(ScaffoldConfigError) as exc_info:
            load_scaffold_config(tmp_path)

        assert "Invalid YAML" in str(exc_info.value)
        assert "config.yaml" in str(exc_info.value)

    def test_ignore_must_be_list(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "gitignore:\n  ignore:\n    path: dist\n")

        with pytest.raises(ScaffoldConfigError, match="gitignore.ignore"):
            load_scaffold_config(tmp_path)

    def test_section_must_be_mapping(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "gitignore: [dist]\n")

        with pytest.raises(ScaffoldConfigError, match="gitignore section"):
            load_scaffold_config(tmp_path)


def test_save_preserves_other_sections(tmp_path: Path) -> None:
    _write_config(tmp_path, "project:\n  name: demo\n")

    save_scaffold_config(tmp_path, ScaffoldConfig(ignore=["dist"]))
    content = (tmp_path / ".scaffold" / "config.yaml").read_text(encoding="utf-8")

    assert "name: demo" in content
    assert load_scaffold_config(tmp_path).ignore == ["dist"]


def test_save_creates_directory(tmp_path: Path) -> None:
    save_scaffold_config(tmp_path, ScaffoldConfig(ignore=["build/"]))
    assert load_scaffold_config(tmp_path).ignore == ["build/"]
