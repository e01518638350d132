"""
Pipeline middleware: bearer authentication, retry with exponential backoff,
session-expiry handling and request metrics.

Recommended order, outermost first::

    MetricsMiddleware -> SessionExpiryMiddleware -> RetryMiddleware
        -> BearerAuthMiddleware -> transport
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

import httpx

from hotel_client.http.metrics import HealthMonitor, RequestMetrics
from hotel_client.http.pipeline import ApiRequest, Handler
from hotel_client.session.navigator import Navigator
from hotel_client.session.store import SessionStore
from hotel_client.utils.exceptions import (
    HotelClientError,
    HTTPStatusError,
    NetworkError,
    SessionExpiredError,
    TransportError,
)

logger = logging.getLogger(__name__)

SESSION_EXPIRED_MESSAGE = "Session expired. Please login again."


class BearerAuthMiddleware:
    """Attach the stored bearer token and stamp the attempt start time."""

    def __init__(self, store: SessionStore) -> None:
        self.store = store

    async def __call__(self, request: ApiRequest, call_next: Handler) -> httpx.Response:
        token = self.store.get_token()
        if token:
            request.set_header("Authorization", f"Bearer {token}")
        request.context.start_time = time.monotonic()
        return await call_next(request)


def is_transient(error: Exception) -> bool:
    """Network failures, timeouts and 5xx responses are worth retrying."""
    if isinstance(error, NetworkError):
        return True
    return isinstance(error, HTTPStatusError) and error.status_code >= 500


class RetryMiddleware:
    """
    Retry transient failures with exponential backoff.

    The retry counter lives on the request context, so concurrent calls
    never consume each other's attempts. The n-th retry waits
    ``base_delay * multiplier ** (n - 1)`` seconds.
    """

    def __init__(
        self,
        max_retries: int = 3,
        base_delay: float = 1.0,
        multiplier: float = 2.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.multiplier = multiplier
        self._sleep = sleep

    def backoff_delay(self, retry_number: int) -> float:
        return self.base_delay * self.multiplier ** (retry_number - 1)

    def should_retry(self, error: Exception, request: ApiRequest) -> bool:
        return is_transient(error) and request.context.retry_count < self.max_retries

    async def __call__(self, request: ApiRequest, call_next: Handler) -> httpx.Response:
        context = request.context
        while True:
            try:
                return await call_next(request)
            except TransportError as e:
                if not self.should_retry(e, request):
                    raise
                context.retried = True
                context.retry_count += 1
                delay = self.backoff_delay(context.retry_count)
                context.retry_delays.append(delay)
                logger.warning(
                    f"API request failed, retrying in {delay}s... "
                    f"({context.retry_count}/{self.max_retries}): {e}",
                    extra={
                        "method": request.method,
                        "path": request.path,
                        "error_type": type(e).__name__,
                        "retry_count": context.retry_count,
                    },
                )
                await self._sleep(delay)


class SessionExpiryMiddleware:
    """
    Turn a rejected credential into a cleared session and a login redirect.

    Only applies while the client is away from an authentication page;
    otherwise the 401 propagates unchanged.
    """

    def __init__(
        self,
        store: SessionStore,
        navigator: Navigator,
        redirect_path: str = "/auth",
    ) -> None:
        self.store = store
        self.navigator = navigator
        self.redirect_path = redirect_path

    async def __call__(self, request: ApiRequest, call_next: Handler) -> httpx.Response:
        try:
            return await call_next(request)
        except HTTPStatusError as e:
            if e.status_code != 401 or self.navigator.is_auth_page():
                raise
            logger.warning(
                "Credential rejected, clearing session",
                extra={"method": request.method, "path": request.path},
            )
            self.store.clear()
            self.navigator.redirect(self.redirect_path)
            raise SessionExpiredError(
                SESSION_EXPIRED_MESSAGE, details={"path": request.path}
            ) from e


class MetricsMiddleware:
    """Log request outcomes and record them in the health monitor."""

    def __init__(self, monitor: HealthMonitor | None = None) -> None:
        self.monitor = monitor

    async def __call__(self, request: ApiRequest, call_next: Handler) -> httpx.Response:
        started = time.monotonic()
        try:
            response = await call_next(request)
        except HotelClientError as e:
            status_code = getattr(e, "status_code", None)
            logger.error(
                f"API Error: {request.method} {request.path} - {e.message}",
                extra={
                    "method": request.method,
                    "path": request.path,
                    "status_code": status_code,
                    "response_data": getattr(e, "response_data", None),
                    "retry_count": request.context.retry_count,
                },
            )
            await self._record(request, started, status_code, type(e).__name__)
            raise

        attempt_start = request.context.start_time or started
        duration_ms = (time.monotonic() - attempt_start) * 1000
        logger.debug(
            f"API Request: {request.method} {request.path} - {duration_ms:.0f}ms",
            extra={
                "method": request.method,
                "path": request.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "retry_count": request.context.retry_count,
            },
        )
        await self._record(request, started, response.status_code, None)
        return response

    async def _record(
        self,
        request: ApiRequest,
        started: float,
        status_code: int | None,
        error_type: str | None,
    ) -> None:
        if self.monitor is None:
            return
        await self.monitor.record_request(
            RequestMetrics(
                method=request.method,
                endpoint=request.path,
                operation=request.operation,
                status_code=status_code,
                duration_ms=(time.monotonic() - started) * 1000,
                retry_count=request.context.retry_count,
                error_type=error_type,
            )
        )
