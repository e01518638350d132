"""Room management facade. Create and update are sent as multipart forms."""

from typing import Any

from hotel_client.clients.base_client import BaseServiceClient

ROOM_FILE_FIELDS = ("images", "videos")


class RoomsClient(BaseServiceClient):
    prefix = "/api/rooms"
    context_prefix = "rooms"

    async def get_all_rooms(self, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", self._path(), "getAllRooms", params=params)

    async def get_room_by_id(self, room_id: str) -> Any:
        room_id = self._require_id(room_id, "Room", "getRoomById")
        return await self.request("GET", self._path(room_id), "getRoomById")

    async def create_room(self, room_data: dict[str, Any]) -> Any:
        """
        Create a room.

        ``images`` and ``videos`` may mix new files (UploadFile, bytes, file
        objects, paths) with URLs of media that is already uploaded.
        """
        return await self.request_multipart(
            "POST", self._path(), "createRoom", room_data, ROOM_FILE_FIELDS
        )

    async def update_room(self, room_id: str, room_data: dict[str, Any]) -> Any:
        room_id = self._require_id(room_id, "Room", "updateRoom")
        return await self.request_multipart(
            "PUT", self._path(room_id), "updateRoom", room_data, ROOM_FILE_FIELDS
        )

    async def delete_room(self, room_id: str) -> Any:
        room_id = self._require_id(room_id, "Room", "deleteRoom")
        return await self.request("DELETE", self._path(room_id), "deleteRoom")
