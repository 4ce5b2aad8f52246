"""Network helpers and configuration for the session web server."""

from __future__ import annotations

import os
import socket
from dataclasses import dataclass

_MAX_PORT = 65535
_PORT_SEARCH_SPAN = 100
_LOOPBACK = "127.0.0.1"


def _port_is_free(port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        if os.name != "nt":
            probe.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            probe.bind((_LOOPBACK, port))
        except OSError:
            return False
    return True


def find_available_port(base_port: int) -> int | None:
    """Return the first port from ``base_port`` on that can be bound locally.

    Up to 100 ports after ``base_port`` are tried, in order. Returns None
    if none of them is free.
    """
    if not 0 <= base_port <= _MAX_PORT:
        raise ValueError(f"port out of range: {base_port}")
    last = min(base_port + _PORT_SEARCH_SPAN, _MAX_PORT)
    return next(
        (port for port in range(base_port, last + 1) if _port_is_free(port)),
        None,
    )


@dataclass
class ServerConfig:
    """Configuration for the web server."""

    base_port: int = 3000
    open_browser: bool = True