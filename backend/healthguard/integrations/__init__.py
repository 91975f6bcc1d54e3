"""
External Service Integrations

This package contains HTTP clients for external services:
- Wikipedia / Wikimedia (health article search)
"""

from healthguard.integrations.wikipedia import WikipediaClient, wikipedia_client

__all__ = [
    "WikipediaClient",
    "wikipedia_client",
]
