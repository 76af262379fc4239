"""Exception hierarchy for scaffold-ignore."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base exception for scaffold-ignore errors."""
    pass


class StagingError(ScaffoldError):
    """Raised when a staged path is invalid or cannot be committed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot stage {path!r}: {reason}")


class ScaffoldConfigError(ScaffoldError):
    """Raised when .scaffold/config.yaml cannot be parsed or validated."""


class PromptUnavailableError(ScaffoldError):
    """Raised when a generator is asked to prompt without a prompter."""

    def __init__(self, message: str | None = None):
        super().__init__(
            message or "No prompter configured for this generator; interactive prompts are unavailable."
        )


__all__ = [
    "ScaffoldError",
    "StagingError",
    "ScaffoldConfigError",
    "PromptUnavailableError",
]
