"""Rendering backends."""

from docfront.backends.markdown import MarkdownBackend, page_path

__all__ = ["MarkdownBackend", "page_path"]
