"""Errors raised by the search engines on degenerate input."""

from __future__ import annotations


class SearchError(Exception):
    """Base class for search failures."""


class NoLegalActionError(SearchError):
    """The search root offers no legal action to fall back on."""
