"""Scanner for Claude Code sessions stored under ``~/.claude/projects``.

Session files are JSONL transcripts. Only enough of each line is decoded
to count messages, find the first user prompt and tally tool usage.
"""

from __future__ import annotations

import json
import os
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from panko.scanner.models import (
    AgentType,
    DirectoryReadError,
    FileReadError,
    MetadataError,
    SessionMeta,
    SessionScanner,
)

_PREVIEW_LENGTH = 100
_COMMAND_PREFIXES = ("<command-name>", "<local-command")
_BLOCK_FIELDS = ("type", "text", "tool_use_id", "name")


@dataclass(frozen=True)
class _Block:
    block_type: str | None
    text: str | None
    tool_use_id: str | None
    name: str | None


@dataclass(frozen=True)
class _Entry:
    entry_type: str
    is_meta: bool
    content: str | list[_Block] | None = None
    blocks: list[_Block] = field(default_factory=list)


class _Malformed(ValueError):
    """A line that does not have the expected shape."""


def _optional_str(obj: dict, key: str) -> str | None:
    value = obj.get(key)
    if value is not None and not isinstance(value, str):
        raise _Malformed(key)
    return value


def _parse_block(raw) -> _Block:
    if not isinstance(raw, dict):
        raise _Malformed("content block")
    return _Block(*(_optional_str(raw, key) for key in _BLOCK_FIELDS))


def _parse_entry(line: str) -> _Entry | None:
    """Decode one transcript line, or return None if it is malformed."""
    try:
        raw = json.loads(line)
        if not isinstance(raw, dict) or not isinstance(raw.get("type"), str):
            raise _Malformed("type")
        is_meta = raw.get("isMeta")
        if is_meta is not None and not isinstance(is_meta, bool):
            raise _Malformed("isMeta")

        content: str | list[_Block] | None = None
        message = raw.get("message")
        if message is not None:
            if not isinstance(message, dict):
                raise _Malformed("message")
            raw_content = message.get("content")
            if isinstance(raw_content, str):
                content = raw_content
            elif isinstance(raw_content, list):
                content = [_parse_block(item) for item in raw_content]
            elif raw_content is not None:
                raise _Malformed("content")
    except (ValueError, RecursionError):
        return None
    return _Entry(raw["type"], bool(is_meta), content)


def _extract_tool_usage(entry: _Entry) -> list[str]:
    """Names of the tools invoked by an assistant entry."""
    if not isinstance(entry.content, list):
        return []
    return [
        block.name
        for block in entry.content
        if block.block_type == "tool_use" and block.name is not None
    ]


def _extract_prompt(entry: _Entry) -> str | None:
    """The text a user typed, skipping tool results."""
    if entry.content is None or isinstance(entry.content, str):
        return entry.content
    texts = [
        block.text
        for block in entry.content
        if block.tool_use_id is None
        and block.block_type == "text"
        and block.text is not None
    ]
    return "\n".join(texts) if texts else None


def _lines(handle):
    """Yield decoded lines of a binary file, skipping undecodable ones."""
    for raw in handle:
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            continue
        yield text.rstrip("\n").removesuffix("\r")


def truncate_prompt(prompt: str, max_chars: int) -> str:
    """Trim ``prompt`` and cut it to at most ``max_chars`` bytes plus "...".

    The cut is made at the last whitespace before the limit unless that
    would keep less than half of the allowed length.
    """
    prompt = prompt.strip()
    encoded = prompt.encode("utf-8")
    if len(encoded) <= max_chars:
        return prompt

    offsets: list[tuple[int, str]] = []
    position = 0
    for char in prompt:
        if position >= max_chars:
            break
        offsets.append((position, char))
        position += len(char.encode("utf-8"))

    spaces = [index for index, char in offsets if char.isspace()]
    cut = spaces[-1] if spaces else max_chars

    if cut < max_chars // 2:
        if offsets:
            index, char = offsets[-1]
            cut = index + len(char.encode("utf-8"))
        else:
            cut = max_chars

    return encoded[:cut].decode("utf-8", errors="ignore") + "..."


def decode_project_path(encoded) -> str:
    """Return a readable project name for an encoded project directory.

    Claude Code encodes ``/`` as ``-``; since project names may contain
    hyphens the directory name itself is kept. Byte and path-like names
    are converted to text with the file-system encoding.
    """
    return os.fsdecode(encoded)


class ClaudeScanner(SessionScanner):
    """Scanner for Claude Code sessions."""

    def name(self) -> str:
        return "claude"

    def agent_type(self) -> AgentType:
        return AgentType.CLAUDE

    def scan_session_file(self, path, project_path: str) -> SessionMeta:
        """Extract lightweight metadata from one session file.

        Raises MetadataError if the file cannot be stat'ed and
        FileReadError if it cannot be opened.
        """
        path = Path(path)
        try:
            mtime = path.stat().st_mtime
        except OSError as exc:
            raise MetadataError(path, exc) from exc
        updated_at = datetime.fromtimestamp(mtime, tz=timezone.utc)
        session_id = path.stem or "unknown"

        message_count = 0
        first_prompt: str | None = None
        tool_usage: Counter[str] = Counter()

        try:
            handle = path.open("rb")
        except OSError as exc:
            raise FileReadError(path, exc) from exc

        with handle:
            for line in _lines(handle):
                if not line.strip():
                    continue
                entry = _parse_entry(line)
                if entry is None:
                    continue
                if entry.entry_type not in ("user", "assistant") or entry.is_meta:
                    continue

                message_count += 1

                if first_prompt is None and entry.entry_type == "user":
                    prompt = _extract_prompt(entry)
                    if prompt is not None and not prompt.startswith(_COMMAND_PREFIXES):
                        first_prompt = truncate_prompt(prompt, _PREVIEW_LENGTH)

                if entry.entry_type == "assistant":
                    tool_usage.update(_extract_tool_usage(entry))

        return SessionMeta(
            id=session_id,
            path=path,
            project_path=project_path,
            updated_at=updated_at,
            message_count=message_count,
            first_prompt_preview=first_prompt,
            tool_usage=dict(tool_usage) if tool_usage else None,
            agent_type=AgentType.CLAUDE,
        )

    def scan_directory(self, root) -> list[SessionMeta]:
        """Scan project directories under ``root`` for ``.jsonl`` sessions.

        A missing root yields no sessions; unreadable project directories
        and session files are skipped. Results are newest first.
        """
        root = Path(root)
        if not root.exists():
            return []

        try:
            project_dirs = list(os.scandir(root))
        except OSError as exc:
            raise DirectoryReadError(root, exc) from exc

        sessions: list[SessionMeta] = []
        for project_entry in project_dirs:
            project_dir = Path(project_entry.path)
            if not project_dir.is_dir():
                continue
            project_path = decode_project_path(project_entry.name)

            try:
                files = list(os.scandir(project_dir))
            except OSError:
                continue

            for file_entry in files:
                file_path = Path(file_entry.path)
                if file_path.suffix != ".jsonl":
                    continue
                try:
                    sessions.append(self.scan_session_file(file_path, project_path))
                except (MetadataError, FileReadError, OSError):
                    continue

        sessions.sort(key=lambda meta: meta.updated_at, reverse=True)
        return sessions

    def default_roots(self) -> list[Path]:
        try:
            home = Path.home()
        except RuntimeError:
            return []
        return [home / ".claude" / "projects"]