"""
Schema validation tests for Hotel Mania models.

Tests verify that all models inherit from HotelBaseModel with extra="allow"
configuration, ensuring API responses with additional fields are handled gracefully.
"""

from datetime import datetime

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hotel_client.models.common import (
    AuthSession,
    Booking,
    GalleryItem,
    HotelBaseModel,
    MenuItem,
    PaymentIntent,
    Room,
    UserProfile,
)

ALL_MODELS = [AuthSession, Booking, GalleryItem, MenuItem, PaymentIntent, Room, UserProfile]


def get_extra_config(model_class: type[BaseModel]) -> str | None:
    """Get the 'extra' config value from a Pydantic model class."""
    model_config = getattr(model_class, "model_config", None)
    if model_config is not None and isinstance(model_config, dict):
        return model_config.get("extra")
    return None


class TestModelInheritance:
    """Every resource model accepts unknown fields."""

    @pytest.mark.parametrize("model_class", ALL_MODELS)
    def test_inherits_from_base(self, model_class):
        assert issubclass(model_class, HotelBaseModel)

    @pytest.mark.parametrize("model_class", ALL_MODELS)
    def test_extra_allow(self, model_class):
        assert get_extra_config(model_class) == "allow"


class TestResourceModels:
    def test_room_from_api_payload(self):
        room = Room.model_validate(
            {
                "_id": "r1",
                "name": "Deluxe",
                "price": 150,
                "isAvailable": True,
                "images": ["/uploads/r1.jpg"],
                "floor": 3,
            }
        )

        assert room.id == "r1"
        assert room.is_available is True
        assert room.price == 150.0
        assert room.amenities == []
        assert room.model_extra == {"floor": 3}

    def test_room_by_field_name(self):
        assert Room(id="r2", is_available=False).is_available is False

    def test_booking_dates(self):
        booking = Booking.model_validate(
            {
                "_id": "b1",
                "checkIn": "2026-11-01T00:00:00Z",
                "checkOut": "2026-11-03T00:00:00Z",
                "totalPrice": 300,
                "room": {"_id": "r1", "name": "Deluxe"},
            }
        )

        assert isinstance(booking.check_in, datetime)
        assert booking.total_price == 300.0
        assert booking.room["name"] == "Deluxe"

    def test_auth_session(self):
        session = AuthSession.model_validate(
            {"token": "tok", "user": {"_id": "u1", "email": "a@b.co", "role": "admin"}}
        )

        assert session.user.id == "u1"
        assert session.user.role == "admin"

    def test_auth_session_requires_token(self):
        with pytest.raises(PydanticValidationError):
            AuthSession.model_validate({"user": {"_id": "u1"}})

    def test_payment_intent_alias(self):
        intent = PaymentIntent.model_validate({"clientSecret": "pi_secret", "id": "pi"})

        assert intent.client_secret == "pi_secret"

    def test_menu_and_gallery_items(self):
        item = MenuItem.model_validate({"_id": "m1", "price": "9.5", "category": "mains"})
        photo = GalleryItem.model_validate({"_id": "g1", "type": "video"})

        assert item.price == 9.5
        assert photo.type == "video"

    def test_validate_assignment(self):
        room = Room(id="r1")

        with pytest.raises(PydanticValidationError):
            room.price = "not a number"
