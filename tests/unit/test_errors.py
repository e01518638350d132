"""
Unit tests for error message extraction and normalization.
"""

from datetime import datetime

import pytest

from hotel_client.utils.errors import (
    GENERIC_ERROR_MESSAGE,
    extract_error_message,
    normalize_error,
)
from hotel_client.utils.exceptions import (
    HTTPStatusError,
    NetworkError,
    NormalizedError,
    SessionExpiredError,
    ValidationError,
)


def status_error(status_code, response_data=None):
    return HTTPStatusError(
        f"Request failed with status code {status_code}",
        status_code=status_code,
        response_data=response_data,
    )


class TestExtractErrorMessage:
    """Message precedence: error, message, exception text, generic."""

    def test_error_field_wins(self):
        error = status_error(400, {"error": "Room already booked", "message": "Bad"})

        assert extract_error_message(error) == "Room already booked"

    def test_message_field(self):
        error = status_error(404, {"message": "Room not found"})

        assert extract_error_message(error) == "Room not found"

    @pytest.mark.parametrize(
        "response_data",
        [None, "Internal Server Error", {}, {"error": ""}, {"error": 5}, ["x"]],
    )
    def test_falls_back_to_exception_message(self, response_data):
        error = status_error(500, response_data)

        assert extract_error_message(error) == "Request failed with status code 500"

    def test_network_error(self):
        assert extract_error_message(NetworkError("Network Error")) == "Network Error"

    def test_generic_fallback(self):
        assert extract_error_message(RuntimeError()) == GENERIC_ERROR_MESSAGE


class TestNormalizeError:
    def test_carries_status_and_context(self):
        normalized = normalize_error(
            status_error(422, {"error": "Invalid dates"}), "bookings.createBooking"
        )

        assert isinstance(normalized, NormalizedError)
        assert normalized.message == "Invalid dates"
        assert normalized.status_code == 422
        assert normalized.context == "bookings.createBooking"
        assert datetime.fromisoformat(normalized.timestamp)

    def test_network_failure_has_no_status(self):
        normalized = normalize_error(NetworkError("Connection refused"), "rooms.getAllRooms")

        assert normalized.status_code is None

    def test_session_expired_is_401(self):
        normalized = normalize_error(
            SessionExpiredError("Session expired. Please login again."), "auth.getCurrentUser"
        )

        assert normalized.status_code == 401
        assert normalized.message == "Session expired. Please login again."

    def test_validation_error(self):
        normalized = normalize_error(ValidationError("Room ID is required"), "rooms.deleteRoom")

        assert normalized.message == "Room ID is required"
        assert normalized.status_code is None

    def test_to_dict(self):
        normalized = NormalizedError(
            "Boom", status_code=500, context="menu.getAllMenuItems", timestamp="t"
        )

        assert normalized.to_dict() == {
            "message": "Boom",
            "status": 500,
            "context": "menu.getAllMenuItems",
            "timestamp": "t",
        }
