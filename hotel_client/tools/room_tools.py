"""
Room and gallery tools for the Hotel Mania MCP server.
"""

from typing import Any

from fastmcp import FastMCP

from hotel_client.models.result import as_result
from hotel_client.tools import tool_response
from hotel_client.utils.client_factory import get_api_client


def register_room_tools(app: FastMCP):
    """Register room and gallery MCP tools."""

    @app.tool()
    async def list_rooms() -> dict[str, Any]:
        """
        List all rooms.

        Returns:
            Dictionary containing the rooms
        """
        client = get_api_client()
        return tool_response(await as_result(client.rooms.get_all_rooms()))

    @app.tool()
    async def get_room(room_id: str) -> dict[str, Any]:
        """
        Get a single room.

        Args:
            room_id: Room identifier

        Returns:
            Dictionary containing the room details
        """
        client = get_api_client()
        return tool_response(
            await as_result(client.rooms.get_room_by_id(room_id)), room_id=room_id
        )

    @app.tool()
    async def delete_room(room_id: str) -> dict[str, Any]:
        """
        Delete a room. Requires an administrator session.

        Args:
            room_id: Room identifier
        """
        client = get_api_client()
        return tool_response(
            await as_result(client.rooms.delete_room(room_id)), room_id=room_id
        )

    @app.tool()
    async def list_gallery_items() -> dict[str, Any]:
        """
        List all gallery images and videos.

        Returns:
            Dictionary containing the gallery items
        """
        client = get_api_client()
        return tool_response(await as_result(client.gallery.get_all_gallery_items()))
