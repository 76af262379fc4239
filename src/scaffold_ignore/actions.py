"""File actions a component can hand to the project builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union


@dataclass(frozen=True)
class WriteAction:
    """Stage *content* at *path*."""

    path: str
    content: str
    kind: Literal["write"] = "write"

    def lines(self) -> list[str]:
        return self.content.split("\n")


@dataclass(frozen=True)
class DeleteAction:
    """Stage the deletion of *path*."""

    path: str
    kind: Literal["delete"] = "delete"


FileAction = Union[WriteAction, DeleteAction]


def to_dict(action: FileAction) -> dict[str, str]:
    """Serialize an action for JSON output."""
    data = {"kind": action.kind, "path": action.path}
    if isinstance(action, WriteAction):
        data["content"] = action.content
    return data


__all__ = ["DeleteAction", "FileAction", "WriteAction", "to_dict"]
