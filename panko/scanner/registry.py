"""A registry holding several session scanners behind one interface."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from panko.scanner.claude import ClaudeScanner
from panko.scanner.codex import CodexScanner
from panko.scanner.models import AgentType, ScanError, SessionMeta, SessionScanner


def _newest_first(sessions: list[SessionMeta]) -> list[SessionMeta]:
    return sorted(sessions, key=lambda meta: meta.updated_at, reverse=True)


class ScannerRegistry:
    """Holds session scanners and scans with all of them at once."""

    def __init__(self, scanners: Iterable[SessionScanner] | None = None) -> None:
        self._scanners: list[SessionScanner] = list(scanners or ())

    @classmethod
    def default(cls) -> ScannerRegistry:
        """A registry with the Claude and Codex scanners registered."""
        return cls([ClaudeScanner(), CodexScanner()])

    @property
    def scanners(self) -> tuple[SessionScanner, ...]:
        """The registered scanners, in registration order."""
        return tuple(self._scanners)

    def register(self, scanner: SessionScanner) -> None:
        """Add a scanner to the registry."""
        self._scanners.append(scanner)

    def get_scanner(self, name: str) -> SessionScanner | None:
        """The first scanner with the given name, if any."""
        return next((s for s in self._scanners if s.name() == name), None)

    def get_scanner_by_type(self, agent_type: AgentType) -> SessionScanner | None:
        """The first scanner for the given agent type, if any."""
        return next((s for s in self._scanners if s.agent_type() == agent_type), None)

    def scan_directory(self, root) -> list[SessionMeta]:
        """Scan ``root`` with every scanner and combine the results.

        Scanners that fail on the directory are skipped. Results are
        newest first.
        """
        root = Path(root)
        sessions: list[SessionMeta] = []
        for scanner in self._scanners:
            try:
                sessions.extend(scanner.scan_directory(root))
            except ScanError:
                continue
        return _newest_first(sessions)

    def scan_all_defaults(self) -> list[SessionMeta]:
        """Scan every scanner's default roots and combine the results.

        Missing roots and roots that cannot be read are skipped. Results
        are newest first.
        """
        sessions: list[SessionMeta] = []
        for scanner in self._scanners:
            for root in scanner.default_roots():
                if not Path(root).exists():
                    continue
                try:
                    sessions.extend(scanner.scan_directory(root))
                except ScanError:
                    continue
        return _newest_first(sessions)

    def registered_agent_types(self) -> list[AgentType]:
        """Agent types of the registered scanners, in registration order."""
        return [scanner.agent_type() for scanner in self._scanners]

    @staticmethod
    def filter_by_agent_type(
        sessions: Iterable[SessionMeta], agent_type: AgentType
    ) -> list[SessionMeta]:
        """The sessions produced by the given agent type."""
        return [meta for meta in sessions if meta.agent_type == agent_type]