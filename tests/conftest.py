from __future__ import annotations

from pathlib import Path

import pytest

from scaffold_ignore.generator import Generator


@pytest.fixture()
def generator() -> Generator:
    """A generator with no destination root; everything stays in memory."""
    return Generator()


@pytest.fixture()
def project_dir(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    return project
