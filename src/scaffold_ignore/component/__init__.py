"""Generator components shipped with scaffold-ignore."""

from . import gitignore
from .static_ignores import StaticIgnores

__all__ = ["StaticIgnores", "gitignore"]
