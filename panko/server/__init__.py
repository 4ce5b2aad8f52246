"""Helpers for a local session web server: content types, port search and configuration."""