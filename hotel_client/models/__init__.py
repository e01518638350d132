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
from hotel_client.models.result import Err, Ok, Result, as_result

__all__ = [
    "AuthSession",
    "Booking",
    "Err",
    "GalleryItem",
    "HotelBaseModel",
    "MenuItem",
    "Ok",
    "PaymentIntent",
    "Result",
    "Room",
    "UserProfile",
    "as_result",
]
