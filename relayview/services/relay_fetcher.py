"""
Relay list fetcher.

Downloads the relay list with httpx and decodes it into ``RelayList``.
``fetch`` folds every failure into a ``FetchFailure`` so callers get exactly
one result and never an exception.
"""

import json
from typing import Optional

import httpx
from pydantic import ValidationError

from relayview.core.config import DEFAULT_API_URL
from relayview.core.exceptions import DecodeError, FetchError, NetworkError, SchemaError
from relayview.core.models import FetchFailure, FetchResult, FetchSuccess, RelayList
from relayview.utils.logger import get_logger

logger = get_logger(__name__)


class RelayFetcher:
    """Fetches the relay list from a fixed endpoint."""
    
    def __init__(
        self,
        url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport
    
    async def load(self) -> RelayList:
        """
        Download and decode the relay list.
        
        Returns:
            Decoded relay list
            
        Raises:
            NetworkError: Connection, TLS, timeout or HTTP status failure
            DecodeError: Body is not JSON
            SchemaError: JSON does not have the expected fields
        """
        body = await self._download()
        
        try:
            document = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(str(e)) from e
        
        try:
            return RelayList.model_validate(document)
        except ValidationError as e:
            fields = [
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'} ({err['msg']})"
                for err in e.errors()
            ]
            raise SchemaError(fields) from e
    
    async def fetch(self) -> FetchResult:
        """Fetch the relay list, reporting any failure as ``FetchFailure``."""
        logger.info(f"Fetching relay list from {self.url}")
        try:
            relay_list = await self.load()
        except FetchError as e:
            logger.error(f"Relay list fetch failed [{e.error_code}]: {e.message}")
            return FetchFailure(error=e.message, error_code=e.error_code)
        
        logger.info(
            f"Fetched {len(relay_list.relays)} relays in "
            f"{len(relay_list.locations)} locations"
        )
        return FetchSuccess.from_relay_list(relay_list)
    
    async def _download(self) -> bytes:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                return response.content
        except httpx.HTTPStatusError as e:
            raise NetworkError(self.url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            reason = str(e) or e.__class__.__name__
            raise NetworkError(self.url, reason) from e
