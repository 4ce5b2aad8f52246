"""Actions requested by the TUI and handled outside its event loop."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from pathlib import Path


class Action:
    """Base class of every action the TUI can request."""


def _path_field():
    return field()


@dataclass(frozen=True)
class _PathAction(Action):
    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))


@dataclass(frozen=True)
class ViewSession(_PathAction):
    """View a session file in the web browser."""


@dataclass(frozen=True)
class CopyContext(_PathAction):
    """Copy a session's context to the clipboard for reuse."""


@dataclass(frozen=True)
class ShareSession(_PathAction):
    """Share a session through a public tunnel, choosing a provider first."""


@dataclass(frozen=True)
class StartSharing(_PathAction):
    """Start sharing a session with a specific tunnel provider."""

    provider: str = ""


@dataclass(frozen=True)
class StopSharing(Action):
    """Stop the current sharing session."""


@dataclass(frozen=True)
class SharingStarted(Action):
    """Sharing has started and the session is available at ``url``."""

    url: str
    provider: str


@dataclass(frozen=True)
class CopyPath(_PathAction):
    """Copy a session file's path to the clipboard."""


@dataclass(frozen=True)
class OpenFolder(_PathAction):
    """Open the folder holding a session file in the file manager."""


@dataclass(frozen=True)
class DeleteSession(_PathAction):
    """Delete a session file."""


@dataclass(frozen=True)
class DownloadSession(_PathAction):
    """Save a copy of a session file to the downloads folder."""


@dataclass(frozen=True)
class CopyShareUrl(Action):
    """Copy a share URL to the clipboard."""

    url: str


@dataclass(frozen=True)
class StopShareById(Action):
    """Stop the share with the given identifier."""

    share_id: Hashable


@dataclass(frozen=True)
class NoAction(Action):
    """Nothing to do."""


def default_action() -> Action:
    """The action used when nothing was requested."""
    return NoAction()