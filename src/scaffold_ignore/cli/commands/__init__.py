"""CLI command modules for scaffold-ignore."""

from .gitignore_cmd import gitignore, preview

__all__ = ["gitignore", "preview"]
