from hotel_client.resources.health_check import register_health_resources

__all__ = ["register_health_resources"]
