"""
Unit tests for the shared API client used by the MCP tools.
"""

import httpx
import pytest

from hotel_client.utils import client_factory
from hotel_client.utils.client_factory import close_api_client, get_api_client
from tests.conftest import BASE_URL, ScriptedServer


@pytest.fixture(autouse=True)
def reset_shared_client(monkeypatch):
    monkeypatch.setattr(client_factory, "_client", None)


class TestSharedClient:
    def test_get_api_client_is_cached(self, settings):
        first = get_api_client(settings)

        assert get_api_client() is first
        assert first.settings.api_url == BASE_URL

    @pytest.mark.asyncio
    async def test_close_api_client_releases_transport(self, settings):
        client = get_api_client(settings)
        client.transport._transport = httpx.MockTransport(
            ScriptedServer(httpx.Response(200, json=[]))
        )
        await client.rooms.get_all_rooms()
        assert client.transport._session is not None

        await close_api_client()

        assert client.transport._session is None
        assert client_factory._client is None
        assert get_api_client(settings) is not client

    @pytest.mark.asyncio
    async def test_close_without_client(self):
        await close_api_client()

        assert client_factory._client is None
