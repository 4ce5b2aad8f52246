"""Core types shared by the session scanners."""

from __future__ import annotations

import dataclasses
import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


class AgentType(enum.Enum):
    """The AI coding agent that produced a session."""

    CLAUDE = "claude"
    CODEX = "codex"

    def display_name(self) -> str:
        """Short human-readable name of the agent."""
        return _DISPLAY_NAMES[self]

    def tag(self) -> str:
        """Two-letter tag for compact display in the UI."""
        return _TAGS[self]

    @classmethod
    def default(cls) -> AgentType:
        """The agent type assumed when none is given."""
        return cls.CLAUDE

    def __str__(self) -> str:
        return self.display_name()


_DISPLAY_NAMES = {AgentType.CLAUDE: "Claude", AgentType.CODEX: "Codex"}
_TAGS = {AgentType.CLAUDE: "CC", AgentType.CODEX: "CX"}


@dataclass(frozen=True)
class SessionMeta:
    """Lightweight metadata about a discovered session."""

    id: str
    path: Path
    project_path: str
    updated_at: datetime
    message_count: int = 0
    first_prompt_preview: str | None = None
    tool_usage: dict[str, int] | None = None
    agent_type: AgentType = AgentType.CLAUDE

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    def with_message_count(self, count: int) -> SessionMeta:
        """Return a copy with the given message count."""
        return dataclasses.replace(self, message_count=count)

    def with_first_prompt_preview(self, preview: str) -> SessionMeta:
        """Return a copy with the given first-prompt preview."""
        return dataclasses.replace(self, first_prompt_preview=str(preview))

    def with_tool_usage(self, tool_usage: dict[str, int]) -> SessionMeta:
        """Return a copy with the given tool usage counts."""
        return dataclasses.replace(self, tool_usage=dict(tool_usage))

    def with_agent_type(self, agent_type: AgentType) -> SessionMeta:
        """Return a copy with the given agent type."""
        return dataclasses.replace(self, agent_type=agent_type)


class ScanError(Exception):
    """Base error raised while scanning for sessions."""

    _action = "failed to scan"

    def __init__(self, path, source: BaseException) -> None:
        self.path = Path(path)
        self.source = source
        super().__init__(f"{self._action} {self.path}: {source}")
        self.__cause__ = source


class DirectoryReadError(ScanError):
    """A directory could not be read."""

    _action = "failed to read directory"


class FileReadError(ScanError):
    """A file could not be read."""

    _action = "failed to read file"


class MetadataError(ScanError):
    """File metadata could not be obtained."""

    _action = "failed to get metadata for"


class SessionScanner(ABC):
    """Discovers sessions of one agent type and extracts their metadata."""

    @abstractmethod
    def name(self) -> str:
        """Name of this scanner, e.g. "claude"."""

    @abstractmethod
    def agent_type(self) -> AgentType:
        """Agent type this scanner handles."""

    @abstractmethod
    def scan_directory(self, root) -> list[SessionMeta]:
        """Scan ``root`` and return metadata of the sessions found.

        Raises a ScanError subclass if the directory itself cannot be read.
        """

    @abstractmethod
    def default_roots(self) -> list[Path]:
        """Directories scanned by default for this agent."""