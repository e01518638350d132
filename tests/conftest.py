"""Shared fixtures for the Hotel Mania client tests."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from hotel_client.clients.api_client import HotelApiClient
from hotel_client.config.settings import Settings
from hotel_client.http.transport import HttpTransport
from hotel_client.session.navigator import Navigator
from hotel_client.session.store import MemorySessionStore

BASE_URL = "http://hotel.test"


class ScriptedServer:
    """
    MockTransport handler that replays scripted responses.

    Each entry is an ``httpx.Response``, an exception to raise, or a
    callable taking the request. The last entry repeats once the script
    runs out.
    """

    def __init__(self, *script: Any) -> None:
        self.script = list(script)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        item = self.script.pop(0) if len(self.script) > 1 else self.script[0]
        if isinstance(item, Exception):
            raise item
        if callable(item) and not isinstance(item, httpx.Response):
            return item(request)
        return item

    @property
    def call_count(self) -> int:
        return len(self.requests)


class RecordingSleep:
    """Backoff sleep replacement that records delays instead of waiting."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_url=BASE_URL, persist_session=False, enable_monitoring=True)


@pytest.fixture
def session_store() -> MemorySessionStore:
    return MemorySessionStore()


@pytest.fixture
def navigator() -> Navigator:
    return Navigator(current_path="/dashboard")


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_client(
    settings: Settings,
    session_store: MemorySessionStore,
    navigator: Navigator,
    recording_sleep: RecordingSleep,
) -> Callable[[ScriptedServer], HotelApiClient]:
    """Build a HotelApiClient wired to a scripted server."""

    def factory(server: ScriptedServer) -> HotelApiClient:
        transport = HttpTransport(BASE_URL, transport=httpx.MockTransport(server))
        return HotelApiClient(
            settings=settings,
            session_store=session_store,
            navigator=navigator,
            transport=transport,
            sleep=recording_sleep,
        )

    return factory
