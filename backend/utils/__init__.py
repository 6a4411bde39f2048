"""Utility modules."""

from .parser import display_host, parse_search_results, relevance_label
from .query import build_search_query, summarize_filters

__all__ = [
    "build_search_query",
    "summarize_filters",
    "parse_search_results",
    "display_host",
    "relevance_label",
]
