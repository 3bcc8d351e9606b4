"""Time-bounded beam and chokudai search for single-player grid games."""

from mazebeam.search import beam_search, chokudai_search

__all__ = ["beam_search", "chokudai_search"]
