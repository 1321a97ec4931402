"""
Remote API extractor for the JSONPlaceholder collections.

One GET per call, no retries: the remote API is treated as reliable, and any
failure is surfaced to the caller as a RemoteError.
"""

import httpx
from typing import Any, Dict, Optional
from core.config import settings
from core.exceptions import RemoteError
import logging

logger = logging.getLogger(__name__)


def build_query_params(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop filter keys whose value is absent or empty"""
    if not params:
        return {}
    return {
        key: value
        for key, value in params.items()
        if value is not None and value != ""
    }


class RemoteFetcher:
    """
    Fetch JSON collections from the remote REST API.

    Attributes:
        base_url: Root of the remote API (no trailing slash)
        timeout: Request timeout in seconds, None waits indefinitely
        transport: Optional httpx transport (tests plug a MockTransport in)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = (base_url or settings.REMOTE_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REMOTE_TIMEOUT_SECONDS
        self.transport = transport

    async def fetch(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET ``endpoint`` with the given filters.

        Args:
            endpoint: Collection path such as "/todos"
            params: Optional filter map (userId, postId, albumId)

        Returns:
            Decoded JSON body (list of records or a single record)

        Raises:
            RemoteError: Non-success status, transport failure or bad JSON
        """
        url = f"{self.base_url}{endpoint}"
        query = build_query_params(params)

        logger.info(f"Fetching {url} params={query}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, params=query)
        except httpx.HTTPError as e:
            raise RemoteError(
                str(e) or f"Request to {url} failed",
                context={"api_url": url, "params": query},
                original_exception=e
            )

        if not response.is_success:
            raise RemoteError(
                f"HTTP error! status: {response.status_code}",
                context={
                    "api_url": url,
                    "params": query,
                    "response_body": response.text[:500]
                },
                remote_status=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteError(
                "Failed to parse JSON response",
                context={
                    "api_url": url,
                    "response_body": response.text[:500]
                },
                original_exception=e
            )

        count = len(data) if isinstance(data, list) else 1
        logger.info(f"Fetched {count} records from {endpoint}")
        return data
