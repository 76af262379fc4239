"""Project-level scaffold configuration.

Extra ignore paths live in ``.scaffold/config.yaml``::

    gitignore:
      ignore:
        - node_modules
        - .tox

Only the ``gitignore`` section is owned here; saving merges into the
existing document and leaves other sections alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ruamel.yaml import YAML

from scaffold_ignore.exceptions import ScaffoldConfigError

logger = logging.getLogger(__name__)

CONFIG_DIR = ".scaffold"
CONFIG_FILE = "config.yaml"


@dataclass
class ScaffoldConfig:
    """Scaffold configuration.

    Attributes:
        ignore: Paths to register for ignoring on every generation run.
    """

    ignore: list[str] = field(default_factory=list)


def config_path(project_root: Path) -> Path:
    return project_root / CONFIG_DIR / CONFIG_FILE


def load_scaffold_config(project_root: Path) -> ScaffoldConfig:
    """Load scaffold configuration from .scaffold/config.yaml."""
    config_file = config_path(project_root)

    if not config_file.exists():
        logger.debug("Config file not found: %s", config_file)
        return ScaffoldConfig()

    yaml = YAML()
    yaml.preserve_quotes = True

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.load(f) or {}
    except Exception as exc:
        logger.error("Failed to load config: %s", exc)
        raise ScaffoldConfigError(f"Invalid YAML in {config_file}: {exc}") from exc

    if not isinstance(data, dict):
        raise ScaffoldConfigError(f"Invalid {config_file}: expected a mapping at the top level")

    section = data.get("gitignore") or {}
    if not isinstance(section, dict):
        raise ScaffoldConfigError(f"Invalid gitignore section in {config_file}: expected a mapping")

    ignore = section.get("ignore", [])
    if ignore is None:
        ignore = []
    if isinstance(ignore, str):
        ignore = [ignore]
    if not isinstance(ignore, list) or not all(isinstance(item, str) for item in ignore):
        raise ScaffoldConfigError(
            f"Invalid gitignore.ignore in {config_file}: expected a list of paths"
        )

    return ScaffoldConfig(ignore=[str(item) for item in ignore])


def save_scaffold_config(project_root: Path, config: ScaffoldConfig) -> None:
    """Save scaffold configuration, preserving unrelated sections."""
    config_file = config_path(project_root)

    yaml = YAML()
    yaml.preserve_quotes = True

    if config_file.exists():
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.load(f) or {}
    else:
        data = {}
        config_file.parent.mkdir(parents=True, exist_ok=True)

    data["gitignore"] = {
        "ignore": list(config.ignore),
    }

    with open(config_file, "w", encoding="utf-8") as f:
        yaml.dump(data, f)

    logger.info("Saved scaffold config to %s", config_file)


__all__ = [
    "CONFIG_DIR",
    "CONFIG_FILE",
    "ScaffoldConfig",
    "config_path",
    "load_scaffold_config",
    "save_scaffold_config",
]
