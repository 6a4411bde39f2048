"""
Tavily search proxy for scholarship discovery.

Forwards a single query to the Tavily API with a fixed set of scholarship
domains and relays the results (or the provider's error) back to the caller.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from backend.config import Settings, settings

logger = logging.getLogger(__name__)

SCHOLARSHIP_DOMAINS = [
    "scholarships.gov.in",
    "buddy4study.com",
    "vidyasaarathi.co.in",
    "scholarships.net",
    "nsp.gov.in",
]

SEARCH_DEPTH = "advanced"
MAX_RESULTS = 10

QUERY_REQUIRED = "Query is required"
FETCH_FAILED = "Failed to fetch scholarships"
INTERNAL_ERROR = "Internal server error"


@dataclass
class ProxyResult:
    """Status code and JSON body to hand back to the caller."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)


class TavilySearchClient:
    """Thin async client for the Tavily search endpoint."""

    def __init__(
        self,
        api_key: str,
        api_url: str = "https://api.tavily.com/search",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self._transport = transport

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> "TavilySearchClient":
        config = config or settings
        return cls(api_key=config.tavily_api_key, api_url=config.tavily_api_url)

    def build_payload(self, query: Any) -> dict[str, Any]:
        return {
            "query": query,
            "search_depth": SEARCH_DEPTH,
            "include_domains": list(SCHOLARSHIP_DOMAINS),
            "max_results": MAX_RESULTS,
            "include_answer": True,
            "include_raw_content": False,
        }

    async def search(self, query: Any) -> httpx.Response:
        """POST one search request. Transport errors propagate."""
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        # No client-side timeout: wait for the provider like a plain fetch would
        async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
            return await client.post(self.api_url, headers=headers, json=self.build_payload(query))


async def search_scholarships(query: Any, client: TavilySearchClient) -> ProxyResult:
    """
    Proxy a scholarship search to Tavily.

    Args:
        query: Free-text query built from the student profile (any truthy
            value is forwarded as is)
        client: Provider client (injected so tests can fake the transport)

    Returns:
        ProxyResult with 200 and the provider's results, 400 for an empty
        query, the provider's status for provider errors, or 500 for anything
        unexpected. Never raises.
    """
    if not query:
        return ProxyResult(400, {"error": QUERY_REQUIRED})

    try:
        logger.info("Searching scholarships")
        response = await client.search(query)

        if not response.is_success:
            details = response.json()
            logger.warning(f"Search provider returned {response.status_code}")
            return ProxyResult(response.status_code, {"error": FETCH_FAILED, "details": details})

        data = response.json()
        results = data.get("results", [])
        logger.info(f"Search provider returned {len(results)} results")
        return ProxyResult(200, {"results": results})

    except Exception:
        logger.exception("Error in search API")
        return ProxyResult(500, {"error": INTERNAL_ERROR})
