"""
HTTP transport for the Hotel Mania API.

Pure I/O: sends an ApiRequest to the configured base URL with a fixed
timeout and maps httpx failures onto the client's transport errors. Retry
and authentication live in the middleware, not here.
"""

import asyncio
import logging
from typing import Any

import httpx

from hotel_client.http.pipeline import ApiRequest
from hotel_client.utils.exceptions import (
    HTTPStatusError,
    NetworkError,
    RequestTimeoutError,
)

logger = logging.getLogger(__name__)


def decode_body(response: httpx.Response) -> Any:
    """Decode a response body as JSON, falling back to text or None."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpTransport:
    """httpx-backed transport with lazy session creation."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            base_url: API base URL, e.g. ``http://localhost:5002``
            timeout_seconds: Per-attempt timeout
            transport: Optional httpx transport (used for mocking in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport
        self._session: httpx.AsyncClient | None = None
        self._session_lock = asyncio.Lock()

    async def _ensure_session(self) -> httpx.AsyncClient:
        """Ensure the HTTP session is initialized."""
        if self._session is None:
            async with self._session_lock:
                if self._session is None:  # Double-check pattern
                    self._session = httpx.AsyncClient(
                        base_url=self.base_url,
                        timeout=httpx.Timeout(self.timeout_seconds),
                        transport=self._transport,
                        headers={
                            "Accept": "application/json",
                            "User-Agent": "Hotel-Mania-Client/1.0 (httpx)",
                        },
                    )
                    logger.debug(
                        "HTTP session initialized",
                        extra={
                            "base_url": self.base_url,
                            "timeout_seconds": self.timeout_seconds,
                        },
                    )
        return self._session

    async def close(self) -> None:
        """Close HTTP session and cleanup resources."""
        if self._session:
            try:
                await self._session.aclose()
                logger.debug("HTTP session closed successfully")
            except Exception as e:
                logger.warning(f"Error closing HTTP session: {e}")
            finally:
                self._session = None

    async def send(self, request: ApiRequest) -> httpx.Response:
        """
        Send a request and return the raw 2xx response.

        Raises:
            RequestTimeoutError: If the attempt exceeded the timeout
            NetworkError: If no response was received
            HTTPStatusError: If the server answered with a non-2xx status
        """
        session = await self._ensure_session()

        headers = dict(request.headers)
        kwargs: dict[str, Any] = {}
        if request.is_multipart:
            # httpx sets multipart/form-data with its own boundary
            headers = {k: v for k, v in headers.items() if k.lower() != "content-type"}
            kwargs["files"] = request.form.parts
        elif request.json_data is not None:
            kwargs["json"] = request.json_data

        try:
            response = await session.request(
                request.method,
                request.path,
                params=request.params,
                headers=headers,
                **kwargs,
            )
        except httpx.TimeoutException as e:
            timeout_ms = int(self.timeout_seconds * 1000)
            raise RequestTimeoutError(
                f"timeout of {timeout_ms}ms exceeded",
                details={"method": request.method, "path": request.path},
            ) from e
        except httpx.RequestError as e:
            raise NetworkError(
                str(e) or "Network Error",
                details={"method": request.method, "path": request.path},
            ) from e

        if response.is_success:
            return response

        raise HTTPStatusError(
            f"Request failed with status code {response.status_code}",
            status_code=response.status_code,
            response_data=decode_body(response),
            details={
                "method": request.method,
                "path": request.path,
                "url": str(response.url),
            },
        )
