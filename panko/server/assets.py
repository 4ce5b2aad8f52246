"""Helpers for serving static assets."""

from __future__ import annotations

_CONTENT_TYPES = (
    (".css", "text/css; charset=utf-8"),
    (".js", "application/javascript; charset=utf-8"),
    (".html", "text/html; charset=utf-8"),
    (".json", "application/json; charset=utf-8"),
    (".svg", "image/svg+xml"),
    (".png", "image/png"),
    (".ico", "image/x-icon"),
)
_FALLBACK = "application/octet-stream"


def content_type(path: str) -> str:
    """The Content-Type header value for a file, chosen by its extension."""
    return next(
        (mime for suffix, mime in _CONTENT_TYPES if path.endswith(suffix)),
        _FALLBACK,
    )