"""
Parsing helpers for search provider output.

- Provider result arrays into SearchResult models
- Display host for a result URL
- Relevance percentage for a result score
"""

import math
from typing import Any
from urllib.parse import urlsplit

from pydantic import TypeAdapter

from backend.api.schemas import SearchResult

_results_adapter = TypeAdapter(list[SearchResult])


def parse_search_results(raw: Any) -> list[SearchResult]:
    """
    Validate a provider results array, preserving order.

    Raises:
        pydantic.ValidationError: if raw is not a list of result objects
    """
    return _results_adapter.validate_python(raw)


def display_host(url: str) -> str:
    """
    Host to show on a result card.

    "https://www.buddy4study.com/x" -> "buddy4study.com". Anything that does
    not parse as an absolute URL is returned unchanged.
    """
    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError:
        return url

    if not parts.scheme or not host:
        return url

    return host.removeprefix("www.")


def relevance_label(score: float | None) -> str | None:
    """Score in [0, 1] as a rounded percentage ("87%"), or None without a score."""
    if not score:
        return None
    # Round half up
    return f"{math.floor(score * 100 + 0.5)}%"
