"""
Booking and payment tools for the Hotel Mania MCP server.
"""

from datetime import date
from typing import Any

from fastmcp import FastMCP

from hotel_client.models.result import as_result
from hotel_client.tools import tool_response
from hotel_client.utils.client_factory import get_api_client


def register_booking_tools(app: FastMCP):
    """Register booking and payment MCP tools."""

    @app.tool()
    async def list_bookings() -> dict[str, Any]:
        """
        List bookings visible to the logged-in user.

        Returns:
            Dictionary containing the bookings
        """
        client = get_api_client()
        return tool_response(await as_result(client.bookings.get_bookings()))

    @app.tool()
    async def create_booking(
        room_id: str,
        check_in: str,
        check_out: str,
        guests: int = 1,
        special_requests: str | None = None,
    ) -> dict[str, Any]:
        """
        Book a room.

        Args:
            room_id: Room identifier
            check_in: Check-in date in YYYY-MM-DD format
            check_out: Check-out date in YYYY-MM-DD format
            guests: Number of guests
            special_requests: Optional notes for the hotel

        Returns:
            Dictionary containing the created booking
        """
        try:
            arrival = date.fromisoformat(check_in)
            departure = date.fromisoformat(check_out)
        except ValueError as e:
            return {"success": False, "error": f"Invalid date format: {e}"}
        if arrival >= departure:
            return {"success": False, "error": "check_out must be after check_in"}

        booking_data = {
            "room": room_id,
            "checkIn": check_in,
            "checkOut": check_out,
            "guests": guests,
        }
        if special_requests:
            booking_data["specialRequests"] = special_requests

        client = get_api_client()
        return tool_response(
            await as_result(client.bookings.create_booking(booking_data))
        )

    @app.tool()
    async def get_booking_stats() -> dict[str, Any]:
        """Get booking statistics. Requires a staff or administrator session."""
        client = get_api_client()
        return tool_response(await as_result(client.bookings.get_booking_stats()))

    @app.tool()
    async def create_payment_intent(
        amount: float, currency: str = "usd", booking_id: str | None = None
    ) -> dict[str, Any]:
        """
        Create a payment intent for a booking.

        Args:
            amount: Amount to charge
            currency: ISO currency code
            booking_id: Booking being paid for

        Returns:
            Dictionary containing the payment client secret
        """
        if amount <= 0:
            return {"success": False, "error": "amount must be positive"}

        details: dict[str, Any] = {"amount": amount, "currency": currency}
        if booking_id:
            details["bookingId"] = booking_id

        client = get_api_client()
        return tool_response(
            await as_result(client.bookings.create_payment_intent(details))
        )
