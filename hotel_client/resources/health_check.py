"""
Health check resources for the Hotel Mania MCP server.

Reports configuration, session and request-monitoring status of the shared
API client.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from fastmcp import FastMCP

from hotel_client.config.settings import get_settings
from hotel_client.utils.client_factory import get_api_client

logger = logging.getLogger(__name__)


def build_health_status() -> dict[str, Any]:
    """
    Collect health information for the server and its API client.

    Returns:
        Dictionary containing health status and detailed checks
    """
    try:
        current_settings = get_settings()
        checks: dict[str, Any] = {
            "mcp_server": True,
            "configuration": not current_settings.validate_required_settings(),
        }

        client_status = get_api_client().get_health_status()
        checks["client"] = client_status

        has_errors = not checks["configuration"] or client_status.get(
            "status"
        ) == "degraded"
        status = "unhealthy" if has_errors else "healthy"

        return {
            "status": status,
            "checks": checks,
            "timestamp": datetime.now(UTC).isoformat(),
        }

    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return {
            "status": "unhealthy",
            "error": str(e),
            "timestamp": datetime.now(UTC).isoformat(),
        }


def register_health_resources(app: FastMCP):
    """Register health check resources."""

    @app.resource("health://status")
    async def health_status() -> dict[str, Any]:
        """Health check resource with detailed status information."""
        return build_health_status()
