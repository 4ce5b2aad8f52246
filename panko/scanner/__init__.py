"""Lightweight discovery of coding-agent sessions on disk."""