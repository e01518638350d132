"""
Common data models for the Hotel Mania API.

Provides a permissive base model and the resource payloads returned by the
API. Unknown fields are kept so server-side additions never break parsing.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HotelBaseModel(BaseModel):
    """Base model for all Hotel Mania entities."""

    model_config = ConfigDict(
        extra="allow",  # Allow extra fields from API responses
        populate_by_name=True,
        use_enum_values=True,
        validate_assignment=True,
    )


class UserProfile(HotelBaseModel):
    """Authenticated user as returned by the auth endpoints."""

    id: str | None = Field(None, alias="_id")
    name: str | None = None
    email: str | None = None
    role: str | None = None


class AuthSession(HotelBaseModel):
    """Login/register response carrying the bearer token."""

    token: str
    user: UserProfile


class Room(HotelBaseModel):
    id: str | None = Field(None, alias="_id")
    name: str | None = None
    type: str | None = None
    price: float | None = None
    capacity: int | None = None
    description: str | None = None
    amenities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    videos: list[str] = Field(default_factory=list)
    is_available: bool | None = Field(None, alias="isAvailable")


class MenuItem(HotelBaseModel):
    id: str | None = Field(None, alias="_id")
    name: str | None = None
    description: str | None = None
    price: float | None = None
    category: str | None = None
    image: str | None = None
    is_available: bool | None = Field(None, alias="isAvailable")


class GalleryItem(HotelBaseModel):
    id: str | None = Field(None, alias="_id")
    title: str | None = None
    description: str | None = None
    category: str | None = None
    type: str | None = None
    url: str | None = None


class Booking(HotelBaseModel):
    id: str | None = Field(None, alias="_id")
    room: Any = None
    user: Any = None
    check_in: datetime | None = Field(None, alias="checkIn")
    check_out: datetime | None = Field(None, alias="checkOut")
    guests: int | None = None
    total_price: float | None = Field(None, alias="totalPrice")
    status: str | None = None


class PaymentIntent(HotelBaseModel):
    """Payment intent created by the payment processor."""

    client_secret: str = Field(alias="clientSecret")
