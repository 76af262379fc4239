"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

console = Console()


def get_project_root_or_exit(project_dir: Path) -> Path:
    """Resolve *project_dir*, exiting with an error if it is not a directory."""
    root = project_dir.expanduser().resolve()
    if not root.is_dir():
        console.print(f"[red]Error:[/red] Project directory does not exist: {root}")
        raise typer.Exit(1)
    return root
