"""Handlers module for the stream search client.

Handlers do NOT print results - they return result objects.
Result printing is handled by ResultPrinter after the handler completes.
"""

from handlers.search_handler import build_criteria, handle_search

__all__ = [
    "build_criteria",
    "handle_search",
]
