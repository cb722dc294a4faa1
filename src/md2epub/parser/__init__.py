"""Markdown parsing for md2epub."""

from .markdown import MarkdownRenderer, split_title, title_from_filename


__all__ = ["MarkdownRenderer", "split_title", "title_from_filename"]
