"""
Chatra Shayak Backend.

Core components:
- api: JSON search proxy and server-rendered pages
- flow: Form wizard and page orchestrator state machines
- tools: Tavily search client
- views: Results view model
"""
