# panko

Breadcrumbs for AI coding sessions. `panko` finds the session transcripts
that coding agents leave on disk. It reads only the metadata it needs from
each one: the session id, the project it belongs to, when it was last
modified, how many messages it holds, a preview of the first prompt, and
which tools were used.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Discovering sessions

`ScannerRegistry.default()` returns a registry that holds a `ClaudeScanner`
and a `CodexScanner`. Claude Code sessions are read from
`~/.claude/projects/`. The default root for Codex is `~/.codex/`.

```python
from panko.scanner.registry import ScannerRegistry

registry = ScannerRegistry.default()

for session in registry.scan_all_defaults():
    print(f"[{session.agent_type.tag()}] {session.id}: "
          f"{session.message_count} messages")
    if session.first_prompt_preview:
        print("   ", session.first_prompt_preview)
```

Results come back newest first. Default roots that do not exist are skipped,
and so are roots that raise a `ScanError`. `registry.scan_directory(root)`
scans one directory with every registered scanner. A scanner that fails on
that directory is skipped.

The registry has these other methods:

- `register(scanner)` adds a scanner.
- `get_scanner(name)` and `get_scanner_by_type(agent_type)` look up a scanner.
- `registered_agent_types()` lists the agent types of the registered scanners.
- The `scanners` property gives the registered scanners as a tuple.
- `ScannerRegistry.filter_by_agent_type(sessions, agent_type)` narrows a list of sessions to one agent.

`ScannerRegistry()` with no arguments is empty.

### Claude Code

```python
from pathlib import Path
from panko.scanner.claude import ClaudeScanner

scanner = ClaudeScanner()
sessions = scanner.scan_directory(Path("~/.claude/projects").expanduser())
one = scanner.scan_session_file("path/to/session.jsonl", "my-project")
```

`scan_directory` looks at every sub-directory of the root, treats each one as a
project, and scans the `*.jsonl` files inside it. A root that does not exist
gives an empty list. Project directories and session files that cannot be read
are skipped.

The scanner treats the lines of a session file as follows:

- Blank lines are skipped. Lines that are not valid JSON, or do not have the
  expected shape, are skipped too.
- Only `user` and `assistant` entries are counted. Entries marked `isMeta` are
  left out.
- The first prompt is taken from the first user entry that carries text.
  Tool results are ignored, and so are prompts that start with
  `<command-name>` or `<local-command`.
- Tool usage counts the `tool_use` blocks in assistant entries.

The module also has two helpers:

- `truncate_prompt(prompt, max_chars)` strips the prompt. If it is longer than
  `max_chars` bytes in UTF-8, it cuts it and adds `"..."`. The cut falls at the
  last whitespace before the limit, unless that would keep less than half the
  limit.
- `decode_project_path(encoded)` returns the project directory name unchanged,
  as text.

### Codex

`CodexScanner` does not recognise any Codex session file format yet. Its
`scan_directory` always returns an empty list.

## Session metadata

Each result is a frozen `SessionMeta` dataclass, defined in
`panko.scanner.models`:

- `id`: the file name without its `.jsonl` extension
- `path`: the full path to the session file
- `project_path`: the project directory name
- `updated_at`: the file's modification time, in UTC
- `message_count`: the number of user and assistant entries, not counting meta entries
- `first_prompt_preview`: the first real user prompt, cut to about 100 characters, or `None`
- `tool_usage`: a mapping from tool name to call count, or `None` if no tools were used
- `agent_type`: an `AgentType` (`CLAUDE` or `CODEX`)

The methods `with_message_count`, `with_first_prompt_preview`,
`with_tool_usage` and `with_agent_type` each return a modified copy.
`AgentType` gives a display name through `display_name()` or `str()`, and a
short tag (`"CC"` or `"CX"`) through `tag()`. `AgentType.default()` is
`CLAUDE`.

When a file or directory cannot be read, scanning raises a subclass of
`ScanError`: `DirectoryReadError`, `FileReadError` or `MetadataError`. Each
one carries the `path` and the underlying `source` exception. To write a
scanner for another agent, subclass `SessionScanner`.

## Other helpers

- `panko.server.assets.content_type(path)` gives the HTTP content type for a
  static asset, based on its file extension. Unknown extensions give
  `application/octet-stream`.
- `panko.server.network.find_available_port(base_port)` returns the first port
  from `base_port` to `base_port + 100` that can be bound on 127.0.0.1. It
  returns `None` if none of them is free, and raises `ValueError` for a port
  outside 0–65535. `ServerConfig` holds `base_port` (default 3000) and
  `open_browser` (default `True`).
- `panko.tui.actions` defines frozen dataclasses for the actions an
  interactive front end can request. These are:
  - `ViewSession`, `CopyContext`, `ShareSession`, `CopyPath`, `OpenFolder`,
    `DeleteSession` and `DownloadSession`, which each take a path
  - `StartSharing` (path and provider)
  - `SharingStarted` (url and provider)
  - `CopyShareUrl` (url)
  - `StopShareById` (share_id)
  - `StopSharing`
  - `NoAction`

  `default_action()` returns `NoAction()`.

## What this package does not do

This package has no command-line program. It does not parse full
transcripts or render them to HTML. It does not run a web server, and it has
no terminal user interface. It does not open tunnels to share sessions. The
server and TUI modules provide only the helpers and data types described
above.