"""``scaffold-ignore gitignore`` and ``scaffold-ignore preview`` commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.table import Table

from scaffold_ignore.actions import FileAction, WriteAction, to_dict
from scaffold_ignore.cli.helpers import console, get_project_root_or_exit
from scaffold_ignore.component import StaticIgnores, gitignore as gitignore_component
from scaffold_ignore.config import load_scaffold_config
from scaffold_ignore.exceptions import ScaffoldError
from scaffold_ignore.generator import Generator, run_generation


def _collect_ignores(project_root: Path, extra: Optional[List[str]]) -> List[str]:
    try:
        config = load_scaffold_config(project_root)
    except ScaffoldError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    return [*config.ignore, *(extra or [])]


def _print_actions(actions: List[FileAction], dry_run: bool) -> None:
    title = "Staged File Actions (dry run)" if dry_run else "Committed File Actions"
    table = Table(title=title, show_header=True)
    table.add_column("Action", style="cyan")
    table.add_column("Path", style="bold")
    table.add_column("Lines", justify="right")

    for action in actions:
        if isinstance(action, WriteAction):
            table.add_row("[green]write[/green]", action.path, str(len(action.lines())))
        else:
            table.add_row("[red]delete[/red]", action.path, "-")

    console.print(table)


def gitignore(
    project_dir: Path = typer.Argument(Path("."), help="Project directory that owns the .gitignore"),
    ignore: Optional[List[str]] = typer.Option(
        None,
        "--ignore",
        "-i",
        help="Extra path to ignore (repeatable)",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show staged actions without writing to disk"),
    json_output: bool = typer.Option(False, "--json", help="Output machine-readable JSON"),
) -> None:
    """Merge configured ignore paths into the project's .gitignore."""
    project_root = get_project_root_or_exit(project_dir)
    paths = _collect_ignores(project_root, ignore)

    generator = Generator(destination_root=project_root)
    try:
        actions = run_generation(generator, [StaticIgnores(paths), gitignore_component])
        if not dry_run:
            generator.fs.commit()
    except ScaffoldError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if json_output:
        print(
            json.dumps(
                {
                    "project_root": str(project_root),
                    "dry_run": dry_run,
                    "actions": [to_dict(action) for action in actions],
                },
                indent=2,
            )
        )
        return

    _print_actions(actions, dry_run)


def preview(
    project_dir: Path = typer.Argument(Path("."), help="Project directory that owns the .gitignore"),
    ignore: Optional[List[str]] = typer.Option(
        None,
        "--ignore",
        "-i",
        help="Extra path to ignore (repeatable)",
    ),
) -> None:
    """Print the lines the merged .gitignore would contain."""
    project_root = get_project_root_or_exit(project_dir)
    paths = _collect_ignores(project_root, ignore)

    generator = Generator(destination_root=project_root)
    existing = generator.fs.read(gitignore_component.GITIGNORE_PATH)
    merged = gitignore_component.merge_ignore_lines(existing, paths)

    if not merged:
        console.print("[yellow]Nothing to ignore; .gitignore would be removed.[/yellow]")
        return
    for line in merged:
        console.print(line, markup=False, highlight=False)


__all__ = ["gitignore", "preview"]
