"""
Tools for Chatra Shayak.

- tavily_search: Scholarship search proxy over the Tavily API
"""

from backend.tools.tavily_search import ProxyResult, TavilySearchClient, search_scholarships

__all__ = ["ProxyResult", "TavilySearchClient", "search_scholarships"]
