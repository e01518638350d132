"""
Request pipeline for the Hotel Mania API client.

A pipeline is an ordered list of middleware callables composed around a
transport. Each middleware receives the request and a ``call_next`` handler
and returns the response, so every stage can be exercised in isolation.
"""

import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

import httpx

logger = logging.getLogger(__name__)


@dataclass
class RequestContext:
    """Per-call state shared by the middleware handling one logical request."""

    start_time: float | None = None
    retried: bool = False
    retry_count: int = 0
    retry_delays: list[float] = field(default_factory=list)


@dataclass
class ApiRequest:
    """An outgoing API request before it reaches the transport."""

    method: str
    path: str
    params: dict[str, Any] | None = None
    json_data: Any = None
    form: Any = None
    headers: dict[str, str] = field(
        default_factory=lambda: {"Content-Type": "application/json"}
    )
    operation: str = ""
    context: RequestContext = field(default_factory=RequestContext)

    @property
    def is_multipart(self) -> bool:
        return self.form is not None

    def set_header(self, name: str, value: str) -> None:
        """Set a header, replacing any existing value regardless of case."""
        self.remove_header(name)
        self.headers[name] = value

    def remove_header(self, name: str) -> None:
        for key in [k for k in self.headers if k.lower() == name.lower()]:
            del self.headers[key]

    def get_header(self, name: str) -> str | None:
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return None


Handler = Callable[[ApiRequest], Awaitable[httpx.Response]]
Middleware = Callable[[ApiRequest, Handler], Awaitable[httpx.Response]]


class Transport(Protocol):
    async def send(self, request: ApiRequest) -> httpx.Response: ...

    async def close(self) -> None: ...


class Pipeline:
    """
    Middleware chain around a transport.

    Middleware are listed outermost first: the first entry sees the request
    before every other stage and the final outcome after them.
    """

    def __init__(
        self, transport: Transport, middleware: Sequence[Middleware] = ()
    ) -> None:
        self.transport = transport
        self.middleware = list(middleware)
        self._handler = self._build()

    def _build(self) -> Handler:
        handler: Handler = self.transport.send
        for stage in reversed(self.middleware):
            handler = self._wrap(stage, handler)
        return handler

    @staticmethod
    def _wrap(stage: Middleware, call_next: Handler) -> Handler:
        async def handler(request: ApiRequest) -> httpx.Response:
            return await stage(request, call_next)

        return handler

    async def send(self, request: ApiRequest) -> httpx.Response:
        return await self._handler(request)

    async def close(self) -> None:
        await self.transport.close()
