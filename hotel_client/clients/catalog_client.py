"""Read-only public catalog: testimonials, services and packages."""

from typing import Any

from hotel_client.clients.base_client import BaseServiceClient


class CatalogClient(BaseServiceClient):
    def _context(self, operation: str) -> str:
        # getAllServices -> services.getAllServices
        return f"{operation.removeprefix('getAll').lower()}.{operation}"

    async def get_all_testimonials(self) -> Any:
        return await self.request(
            "GET", self._path("testimonials"), "getAllTestimonials"
        )

    async def get_all_services(self) -> Any:
        return await self.request("GET", self._path("services"), "getAllServices")

    async def get_all_packages(self) -> Any:
        return await self.request("GET", self._path("packages"), "getAllPackages")
