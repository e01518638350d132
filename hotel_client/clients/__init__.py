from hotel_client.clients.api_client import HotelApiClient
from hotel_client.clients.auth_client import AuthClient
from hotel_client.clients.booking_client import BookingClient
from hotel_client.clients.catalog_client import CatalogClient
from hotel_client.clients.gallery_client import GalleryClient
from hotel_client.clients.menu_client import MenuClient
from hotel_client.clients.rooms_client import RoomsClient

__all__ = [
    "AuthClient",
    "BookingClient",
    "CatalogClient",
    "GalleryClient",
    "HotelApiClient",
    "MenuClient",
    "RoomsClient",
]
