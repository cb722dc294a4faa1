"""Loading book sources from the filesystem."""

from .loader import build_from_directory, load_cover, load_sources, load_stylesheet


__all__ = ["build_from_directory", "load_cover", "load_sources", "load_stylesheet"]
