"""
Authentication facade.

Wraps the auth endpoints and keeps the local session credential in sync
with login, registration and logout.
"""

import logging
from typing import Any

from hotel_client.clients.base_client import BaseServiceClient
from hotel_client.http.pipeline import Pipeline
from hotel_client.session.navigator import Navigator
from hotel_client.session.store import SessionStore
from hotel_client.utils.errors import normalize_error
from hotel_client.utils.exceptions import HotelClientError
from hotel_client.utils.validators import validate_required_fields

logger = logging.getLogger(__name__)


class AuthClient(BaseServiceClient):
    prefix = "/api/auth"
    context_prefix = "auth"

    def __init__(
        self,
        pipeline: Pipeline,
        session: SessionStore,
        navigator: Navigator | None = None,
        home_path: str = "/",
    ) -> None:
        super().__init__(pipeline)
        self.session = session
        self.navigator = navigator
        self.home_path = home_path

    def _store_session(self, payload: Any) -> None:
        if isinstance(payload, dict) and payload.get("token") and payload.get("user"):
            self.session.set_session(payload["token"], payload["user"])
            # A stored session means the client is past the auth page
            if self.navigator is not None and self.navigator.is_auth_page():
                self.navigator.navigate(self.home_path)

    async def login(self, credentials: dict[str, Any]) -> Any:
        """
        Log in and persist the returned token and user.

        Args:
            credentials: ``{"email": ..., "password": ...}``

        Returns:
            Response payload, normally ``{"token": ..., "user": {...}}``
        """
        try:
            validate_required_fields(credentials, ["email", "password"])
        except HotelClientError as e:
            raise normalize_error(e, self._context("login")) from e
        payload = await self.request(
            "POST", self._path("login"), "login", json_data=credentials
        )
        self._store_session(payload)
        return payload

    async def register(self, user_data: dict[str, Any]) -> Any:
        payload = await self.request(
            "POST", self._path("register"), "register", json_data=user_data
        )
        self._store_session(payload)
        return payload

    async def logout(self) -> None:
        """Log out remotely if possible; the local session is always cleared."""
        try:
            await self.request("POST", self._path("logout"), "logout")
        except Exception as e:
            logger.warning(f"Logout API call failed: {e}")
        finally:
            self.session.clear()

    async def get_current_user(self) -> Any:
        return await self.request("GET", self._path("me"), "getCurrentUser")

    async def update_profile(self, user_data: dict[str, Any]) -> Any:
        return await self.request(
            "PUT", self._path("profile"), "updateProfile", json_data=user_data
        )

    async def change_password(self, password_data: dict[str, Any]) -> Any:
        return await self.request(
            "PUT", self._path("change-password"), "changePassword",
            json_data=password_data,
        )

    def is_authenticated(self) -> bool:
        return self.session.is_authenticated()

    def get_token(self) -> str | None:
        return self.session.get_token()

    def get_user(self) -> dict[str, Any] | None:
        return self.session.get_user()
