"""Booking and payment facade (JSON only)."""

from typing import Any

from hotel_client.clients.base_client import BaseServiceClient


class BookingClient(BaseServiceClient):
    prefix = "/api/bookings"
    context_prefix = "bookings"

    async def get_bookings(self, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", self._path(), "getAllBookings", params=params)

    async def get_booking_by_id(self, booking_id: str) -> Any:
        booking_id = self._require_id(booking_id, "Booking", "getBookingById")
        return await self.request("GET", self._path(booking_id), "getBookingById")

    async def create_booking(self, booking_data: dict[str, Any]) -> Any:
        return await self.request(
            "POST", self._path(), "createBooking", json_data=booking_data
        )

    async def update_booking(self, booking_id: str, booking_data: dict[str, Any]) -> Any:
        booking_id = self._require_id(booking_id, "Booking", "updateBooking")
        return await self.request(
            "PUT", self._path(booking_id), "updateBooking", json_data=booking_data
        )

    async def delete_booking(self, booking_id: str) -> Any:
        booking_id = self._require_id(booking_id, "Booking", "deleteBooking")
        return await self.request("DELETE", self._path(booking_id), "deleteBooking")

    async def get_booking_stats(self) -> Any:
        return await self.request("GET", self._path("stats"), "getBookingStats")

    async def create_payment_intent(self, booking_details: dict[str, Any]) -> Any:
        """
        Create a payment intent for a booking.

        Returns:
            Payload with the processor's ``clientSecret``
        """
        return await self.request(
            "POST", "/api/create-payment-intent", "createPaymentIntent",
            json_data=booking_details,
        )
