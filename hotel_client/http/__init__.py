"""Transport, pipeline and middleware for the Hotel Mania API."""

from hotel_client.http.metrics import HealthMonitor, RequestMetrics
from hotel_client.http.middleware import (
    BearerAuthMiddleware,
    MetricsMiddleware,
    RetryMiddleware,
    SessionExpiryMiddleware,
)
from hotel_client.http.pipeline import ApiRequest, Pipeline, RequestContext
from hotel_client.http.transport import HttpTransport

__all__ = [
    "ApiRequest",
    "BearerAuthMiddleware",
    "HealthMonitor",
    "HttpTransport",
    "MetricsMiddleware",
    "Pipeline",
    "RequestContext",
    "RequestMetrics",
    "RetryMiddleware",
    "SessionExpiryMiddleware",
]
