from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from panko.scanner.claude import ClaudeScanner
from panko.scanner.codex import CodexScanner
from panko.scanner.models import (
    AgentType,
    DirectoryReadError,
    SessionMeta,
    SessionScanner,
)
from panko.scanner.registry import ScannerRegistry

TS = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


def _write_claude_dir(root: Path) -> Path:
    project = root / "-home-user-myproject"
    project.mkdir(parents=True)
    session = project / "session-abc123.jsonl"
    session.write_text(
        '{"type":"user","message":{"content":"Test prompt"}}\n'
        '{"type":"assistant","message":{"content":[{"type":"text","text":"Response"}]}}\n',
        encoding="utf-8",
    )
    return session


class _FixedScanner(SessionScanner):
    def __init__(self, sessions, agent=AgentType.CODEX, label="fixed"):
        self._sessions = sessions
        self._agent = agent
        self._label = label

    def name(self):
        return self._label

    def agent_type(self):
        return self._agent

    def scan_directory(self, root):
        return list(self._sessions)

    def default_roots(self):
        return []


class _FailingScanner(SessionScanner):
    def name(self):
        return "failing"

    def agent_type(self):
        return AgentType.CODEX

    def scan_directory(self, root):
        raise DirectoryReadError(root, PermissionError("denied"))

    def default_roots(self):
        return []


def test_registry_default():
    registry = ScannerRegistry.default()
    assert len(registry.scanners) == 2
    assert registry.get_scanner("claude").name() == "claude"
    assert registry.get_scanner("codex").name() == "codex"


def test_registry_new_empty():
    registry = ScannerRegistry()
    assert registry.scanners == ()


def test_registry_register():
    registry = ScannerRegistry()
    registry.register(ClaudeScanner())
    assert len(registry.scanners) == 1
    assert registry.get_scanner("claude").name() == "claude"


def test_get_scanner_unknown_returns_none():
    registry = ScannerRegistry.default()
    assert registry.get_scanner("unknown") is None


def test_get_scanner_by_type():
    registry = ScannerRegistry.default()
    assert registry.get_scanner_by_type(AgentType.CLAUDE).name() == "claude"
    assert registry.get_scanner_by_type(AgentType.CODEX).name() == "codex"


def test_get_scanner_by_type_missing():
    registry = ScannerRegistry([ClaudeScanner()])
    assert registry.get_scanner_by_type(AgentType.CODEX) is None


def test_registered_agent_types():
    registry = ScannerRegistry.default()
    types = registry.registered_agent_types()
    assert AgentType.CLAUDE in types
    assert AgentType.CODEX in types


def test_scan_directory(tmp_path):
    _write_claude_dir(tmp_path)
    registry = ScannerRegistry.default()
    sessions = registry.scan_directory(tmp_path)
    assert len(sessions) == 1
    assert sessions[0].agent_type == AgentType.CLAUDE
    assert "abc123" in sessions[0].id


def test_scan_nonexistent_directory():
    registry = ScannerRegistry.default()
    assert registry.scan_directory(Path("/nonexistent/path")) == []


def test_scan_directory_skips_failing_scanner(tmp_path):
    _write_claude_dir(tmp_path)
    registry = ScannerRegistry([_FailingScanner(), ClaudeScanner()])
    sessions = registry.scan_directory(tmp_path)
    assert [s.agent_type for s in sessions] == [AgentType.CLAUDE]


def test_scan_directory_sorted_newest_first(tmp_path):
    old = SessionMeta("old", Path("/p1"), "proj", TS)
    new = SessionMeta("new", Path("/p2"), "proj", TS + timedelta(days=1))
    mid = SessionMeta("mid", Path("/p3"), "proj", TS + timedelta(hours=1))
    registry = ScannerRegistry(
        [_FixedScanner([old, new], label="a"), _FixedScanner([mid], label="b")]
    )
    sessions = registry.scan_directory(tmp_path)
    assert [s.id for s in sessions] == ["new", "mid", "old"]


def test_scan_all_defaults_reads_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    _write_claude_dir(tmp_path / ".claude" / "projects")
    registry = ScannerRegistry.default()
    sessions = registry.scan_all_defaults()
    assert len(sessions) == 1
    assert "abc123" in sessions[0].id


def test_scan_all_defaults_missing_roots(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    registry = ScannerRegistry.default()
    assert registry.scan_all_defaults() == []


def test_filter_by_agent_type():
    sessions = [
        SessionMeta("s1", Path("/p1"), "proj1", TS).with_agent_type(AgentType.CLAUDE),
        SessionMeta("s2", Path("/p2"), "proj2", TS).with_agent_type(AgentType.CODEX),
        SessionMeta("s3", Path("/p3"), "proj3", TS).with_agent_type(AgentType.CLAUDE),
    ]
    claude = ScannerRegistry.filter_by_agent_type(sessions, AgentType.CLAUDE)
    assert [s.id for s in claude] == ["s1", "s3"]
    codex = ScannerRegistry.filter_by_agent_type(sessions, AgentType.CODEX)
    assert [s.id for s in codex] == ["s2"]


def test_agent_type_display():
    assert AgentType.CLAUDE.display_name() == "Claude"
    assert AgentType.CODEX.display_name() == "Codex"
    assert AgentType.CLAUDE.tag() == "CC"
    assert AgentType.CODEX.tag() == "CX"
    assert str(AgentType.CLAUDE) == "Claude"
    assert str(AgentType.CODEX) == "Codex"


def test_agent_type_default():
    assert AgentType.default() == AgentType.CLAUDE


@pytest.mark.parametrize("scanner_cls", [ClaudeScanner, CodexScanner])
def test_registry_constructed_from_iterable(scanner_cls):
    registry = ScannerRegistry(iter([scanner_cls()]))
    assert registry.registered_agent_types() == [scanner_cls().agent_type()]