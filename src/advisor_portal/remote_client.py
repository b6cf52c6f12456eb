"""Client for the remote MyAdvisor backend API."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx
from loguru import logger

from .core.exceptions import RemoteUnavailableError


@dataclass
class RemoteResponse:
    """Status code and decoded JSON body of a remote call."""
    status_code: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class RemoteClient:
    """Client for communicating with the remote MyAdvisor backend.

    Calls are made without a timeout and are never retried: a failure is
    reported to the caller on first occurrence.
    """

    def __init__(self, base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize remote client.

        Args:
            base_url: Base URL of the remote backend
            transport: Optional httpx transport (used to plug in a mock backend)
        """
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    async def request(
        self,
        method: str,
        path: str,
        token: Optional[str] = None,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> RemoteResponse:
        """Send one request to the remote backend.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            token: Bearer token; the Authorization header is omitted when None
            json: JSON payload
            params: Query parameters

        Returns:
            The remote status code and body, whatever the status

        Raises:
            RemoteUnavailableError: The backend could not be reached or its
                body was not JSON
        """
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                transport=self._transport,
                timeout=None,
            ) as client:
                response = await client.request(
                    method,
                    path,
                    headers=headers,
                    json=json,
                    params=params,
                )
        except httpx.HTTPError as e:
            logger.error(f"Remote {method} {path} failed: {e}")
            raise RemoteUnavailableError() from e

        if not response.content:
            return RemoteResponse(response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Remote {method} {path} returned non-JSON body ({response.status_code})")
            raise RemoteUnavailableError() from e

        if response.is_error:
            logger.warning(f"Remote {method} {path} rejected with {response.status_code}")
        return RemoteResponse(response.status_code, body)
