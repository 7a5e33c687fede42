"""Services for relayview.
"""

from .relay_fetcher import RelayFetcher

__all__ = ["RelayFetcher"]
