"""Discover AI coding-agent session transcripts and read their metadata."""

__version__ = "0.1.0"