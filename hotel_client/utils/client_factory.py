"""
Shared API client for the MCP tools.

The client is created on first use from the global settings so every tool
shares one transport, session store and health monitor.
"""

import logging

from hotel_client.clients.api_client import HotelApiClient
from hotel_client.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

_client: HotelApiClient | None = None


def get_api_client(settings: Settings | None = None) -> HotelApiClient:
    """Get or create the shared API client."""
    global _client
    if _client is None:
        current_settings = settings or get_settings()
        _client = HotelApiClient(settings=current_settings)
        logger.info(
            "API client initialized", extra={"base_url": current_settings.api_url}
        )
    return _client


async def close_api_client() -> None:
    global _client
    if _client is not None:
        await _client.close()
        _client = None
