"""
Restaurant menu and catalog tools for the Hotel Mania MCP server.
"""

from typing import Any

from fastmcp import FastMCP

from hotel_client.models.result import as_result
from hotel_client.tools import tool_response
from hotel_client.utils.client_factory import get_api_client


def register_menu_tools(app: FastMCP):
    """Register menu and catalog MCP tools."""

    @app.tool()
    async def list_menu_items(category: str | None = None) -> dict[str, Any]:
        """
        List restaurant menu items.

        Args:
            category: Only return items in this category

        Returns:
            Dictionary containing the menu items
        """
        client = get_api_client()
        result = tool_response(await as_result(client.menu.get_all_menu_items()))
        if category and result["success"] and isinstance(result["data"], list):
            result["data"] = [
                item
                for item in result["data"]
                if isinstance(item, dict)
                and str(item.get("category", "")).lower() == category.lower()
            ]
        return result

    @app.tool()
    async def delete_menu_item(item_id: str) -> dict[str, Any]:
        """
        Delete a menu item. Requires an administrator session.

        Args:
            item_id: Menu item identifier
        """
        client = get_api_client()
        return tool_response(
            await as_result(client.menu.delete_menu_item(item_id)), item_id=item_id
        )

    @app.tool()
    async def list_services() -> dict[str, Any]:
        """List hotel services."""
        client = get_api_client()
        return tool_response(await as_result(client.catalog.get_all_services()))

    @app.tool()
    async def list_packages() -> dict[str, Any]:
        """List stay packages."""
        client = get_api_client()
        return tool_response(await as_result(client.catalog.get_all_packages()))

    @app.tool()
    async def list_testimonials() -> dict[str, Any]:
        """List guest testimonials."""
        client = get_api_client()
        return tool_response(await as_result(client.catalog.get_all_testimonials()))
