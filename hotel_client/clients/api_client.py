"""
Hotel Mania API client.

Wires the transport, middleware pipeline, session storage and every
resource facade into a single object.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from hotel_client.clients.auth_client import AuthClient
from hotel_client.clients.booking_client import BookingClient
from hotel_client.clients.catalog_client import CatalogClient
from hotel_client.clients.gallery_client import GalleryClient
from hotel_client.clients.menu_client import MenuClient
from hotel_client.clients.rooms_client import RoomsClient
from hotel_client.config.settings import Settings, get_settings
from hotel_client.http.metrics import HealthMonitor
from hotel_client.http.middleware import (
    BearerAuthMiddleware,
    MetricsMiddleware,
    RetryMiddleware,
    SessionExpiryMiddleware,
)
from hotel_client.http.pipeline import Pipeline, Transport
from hotel_client.http.transport import HttpTransport
from hotel_client.session import Navigator, SessionStore, create_session_store

logger = logging.getLogger(__name__)


class HotelApiClient:
    """
    Client for the Hotel Mania REST API.

    Features:
    - Bearer authentication from the stored session
    - Exponential backoff retry for network errors, timeouts and 5xx
    - Session clearing and login redirect when the credential expires
    - Uniform NormalizedError failures from every facade
    - Request metrics and health monitoring
    - Async context management for proper resource cleanup
    """

    def __init__(
        self,
        settings: Settings | None = None,
        session_store: SessionStore | None = None,
        navigator: Navigator | None = None,
        transport: Transport | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """
        Initialize the API client.

        Args:
            settings: Optional settings instance
            session_store: Session storage (defaults per settings)
            navigator: Client location used for login redirects
            transport: Transport override, mainly for tests
            sleep: Backoff sleep function
        """
        self.settings = settings or get_settings()
        self.session = session_store or create_session_store(self.settings)
        self.navigator = navigator or Navigator(auth_paths=self.settings.auth_paths)
        self.transport = transport or HttpTransport(
            self.settings.api_url, timeout_seconds=self.settings.request_timeout
        )
        self.health_monitor = (
            HealthMonitor() if self.settings.enable_monitoring else None
        )

        self.pipeline = Pipeline(
            self.transport,
            [
                MetricsMiddleware(self.health_monitor),
                SessionExpiryMiddleware(
                    self.session,
                    self.navigator,
                    redirect_path=self.settings.auth_redirect_path,
                ),
                RetryMiddleware(**self.settings.get_retry_config(), sleep=sleep),
                BearerAuthMiddleware(self.session),
            ],
        )

        self.auth = AuthClient(
            self.pipeline,
            self.session,
            navigator=self.navigator,
            home_path=self.settings.home_path,
        )
        self.rooms = RoomsClient(self.pipeline)
        self.menu = MenuClient(self.pipeline)
        self.gallery = GalleryClient(self.pipeline)
        self.bookings = BookingClient(self.pipeline)
        self.catalog = CatalogClient(self.pipeline)

    async def __aenter__(self) -> "HotelApiClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self.pipeline.close()

    def get_health_status(self) -> dict[str, Any]:
        """Get client health, session and monitoring status."""
        status: dict[str, Any] = {
            "base_url": self.settings.api_url,
            "monitoring_enabled": self.health_monitor is not None,
            "authentication": {
                "authenticated": self.session.is_authenticated(),
                "current_path": self.navigator.current_path,
                "redirects": self.navigator.redirect_count,
            },
        }
        if self.health_monitor:
            status.update(self.health_monitor.get_health_status())
        return status
