"""
Authentication tools for the Hotel Mania MCP server.

Login stores the session credential locally so later tool calls are sent
with the bearer token.
"""

from typing import Any

from fastmcp import FastMCP

from hotel_client.models.result import as_result
from hotel_client.tools import tool_response
from hotel_client.utils.client_factory import get_api_client
from hotel_client.utils.exceptions import ValidationError
from hotel_client.utils.validators import validate_email


def register_auth_tools(app: FastMCP):
    """Register all authentication MCP tools."""

    @app.tool()
    async def login(email: str, password: str) -> dict[str, Any]:
        """
        Log in to the Hotel Mania API.

        Args:
            email: Account email address
            password: Account password

        Returns:
            Dictionary containing the logged-in user
        """
        try:
            email = validate_email(email)
        except ValidationError as e:
            return {"success": False, "error": e.message}

        client = get_api_client()
        result = await as_result(
            client.auth.login({"email": email, "password": password})
        )
        response = tool_response(result)
        if response["success"] and isinstance(response["data"], dict):
            # Never echo the token back
            response["data"] = {"user": response["data"].get("user")}
        return response

    @app.tool()
    async def logout() -> dict[str, Any]:
        """
        Log out and clear the local session.

        Returns:
            Dictionary confirming the session was cleared
        """
        client = get_api_client()
        await client.auth.logout()
        return {"success": True, "authenticated": client.auth.is_authenticated()}

    @app.tool()
    async def get_current_user() -> dict[str, Any]:
        """
        Get the profile of the logged-in user.

        Returns:
            Dictionary containing the user profile
        """
        client = get_api_client()
        return tool_response(await as_result(client.auth.get_current_user()))
