"""Restaurant menu facade."""

from typing import Any

from hotel_client.clients.base_client import BaseServiceClient

MENU_FILE_FIELDS = ("image",)


class MenuClient(BaseServiceClient):
    prefix = "/api/menu"
    context_prefix = "menu"

    async def get_all_menu_items(self, params: dict[str, Any] | None = None) -> Any:
        return await self.request(
            "GET", self._path(), "getAllMenuItems", params=params
        )

    async def create_menu_item(self, menu_data: dict[str, Any]) -> Any:
        return await self.request_multipart(
            "POST", self._path(), "createMenuItem", menu_data, MENU_FILE_FIELDS
        )

    async def update_menu_item(self, item_id: str, menu_data: dict[str, Any]) -> Any:
        item_id = self._require_id(item_id, "Menu item", "updateMenuItem")
        return await self.request_multipart(
            "PUT", self._path(item_id), "updateMenuItem", menu_data, MENU_FILE_FIELDS
        )

    async def delete_menu_item(self, item_id: str) -> Any:
        item_id = self._require_id(item_id, "Menu item", "deleteMenuItem")
        return await self.request("DELETE", self._path(item_id), "deleteMenuItem")
