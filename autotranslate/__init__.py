"""Translate JSON and INI files through a LibreTranslate server."""

__version__ = "1.0.0"
