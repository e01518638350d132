"""Gallery facade. Each gallery item carries a single image or video ``file``."""

from typing import Any

from hotel_client.clients.base_client import BaseServiceClient

GALLERY_FILE_FIELDS = ("file",)


class GalleryClient(BaseServiceClient):
    prefix = "/api/gallery"
    context_prefix = "gallery"

    async def get_all_gallery_items(self) -> Any:
        return await self.request("GET", self._path(), "getAllGalleryItems")

    async def create_gallery_item(self, gallery_data: dict[str, Any]) -> Any:
        return await self.request_multipart(
            "POST", self._path(), "createGalleryItem", gallery_data,
            GALLERY_FILE_FIELDS,
        )

    async def update_gallery_item(
        self, item_id: str, gallery_data: dict[str, Any]
    ) -> Any:
        item_id = self._require_id(item_id, "Gallery item", "updateGalleryItem")
        return await self.request_multipart(
            "PUT", self._path(item_id), "updateGalleryItem", gallery_data,
            GALLERY_FILE_FIELDS,
        )

    async def delete_gallery_item(self, item_id: str) -> Any:
        item_id = self._require_id(item_id, "Gallery item", "deleteGalleryItem")
        return await self.request("DELETE", self._path(item_id), "deleteGalleryItem")
