"""Command-line entry point for scaffold-ignore."""

from __future__ import annotations

import typer

from scaffold_ignore.cli.commands import gitignore, preview

app = typer.Typer(
    name="scaffold-ignore",
    help="Manage the .gitignore of a scaffolded project",
    add_completion=False,
    no_args_is_help=True,
)

app.command("gitignore")(gitignore)
app.command("preview")(preview)


def main():
    app()


__all__ = ["app", "main"]
