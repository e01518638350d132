"""Async client for the Hotel Mania REST API."""

from hotel_client.clients.api_client import HotelApiClient
from hotel_client.config.settings import Settings, get_settings
from hotel_client.models.result import Err, Ok, as_result
from hotel_client.utils.exceptions import NormalizedError
from hotel_client.utils.multipart import UploadFile

__version__ = "0.1.0"

__all__ = [
    "Err",
    "HotelApiClient",
    "NormalizedError",
    "Ok",
    "Settings",
    "UploadFile",
    "as_result",
    "get_settings",
]
