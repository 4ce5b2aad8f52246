"""Scanner for Codex sessions stored under ``~/.codex``."""

from __future__ import annotations

from pathlib import Path

from panko.scanner.models import AgentType, SessionMeta, SessionScanner


class CodexScanner(SessionScanner):
    """Scanner for Codex sessions.

    No Codex session file format is recognised yet, so scanning a
    directory reports no sessions.
    """

    def name(self) -> str:
        return "codex"

    def agent_type(self) -> AgentType:
        return AgentType.CODEX

    def scan_directory(self, root) -> list[SessionMeta]:
        """Return the sessions found under ``root``; none are recognised."""
        if not Path(root).exists():
            return []
        return []

    def default_roots(self) -> list[Path]:
        try:
            home = Path.home()
        except RuntimeError:
            return []
        return [home / ".codex"]