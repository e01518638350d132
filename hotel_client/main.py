"""
Main entry point for the Hotel Mania MCP server.

Sets up logging and a FastMCP server exposing the Hotel Mania API client
facades as tools.
"""

import asyncio
import json
import logging
import sys
from typing import Any

from fastmcp import FastMCP

from hotel_client import __version__
from hotel_client.config.settings import Settings, get_settings
from hotel_client.resources import register_health_resources
from hotel_client.tools.auth_tools import register_auth_tools
from hotel_client.tools.booking_tools import register_booking_tools
from hotel_client.tools.menu_tools import register_menu_tools
from hotel_client.tools.room_tools import register_room_tools
from hotel_client.utils.client_factory import close_api_client, get_api_client
from hotel_client.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class JSONFormatter(logging.Formatter):
    """Render log records, including ``extra`` fields, as JSON lines."""

    _reserved = set(
        logging.LogRecord("", 0, "", 0, "", (), None).__dict__
    ) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add extra fields if present
        for key, value in record.__dict__.items():
            if key not in self._reserved and key not in log_entry:
                log_entry[key] = value

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(settings: Settings) -> None:
    """Setup logging configuration."""
    level = getattr(logging, settings.get_effective_log_level(), logging.INFO)

    if settings.enable_structured_logging:
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logging.root.handlers = [handler]
    else:
        logging.basicConfig(level=level, format=settings.log_format)

    logging.getLogger().setLevel(level)


app = FastMCP(name="hotel-mania-client")


@app.tool()
async def health_check() -> dict[str, Any]:
    """
    Check the MCP server and its API client.

    Returns:
        Dictionary containing session and request-monitoring status
    """
    try:
        client = get_api_client()
        return {"status": "healthy", "version": __version__, **client.get_health_status()}
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return {"status": "unhealthy", "error": str(e)}


@app.tool()
async def get_server_info() -> dict[str, Any]:
    """
    Get server information and configuration details.

    Returns:
        Dictionary containing server information
    """
    current_settings = get_settings()
    return {
        "name": app.name,
        "version": __version__,
        "description": "MCP server for the Hotel Mania API",
        "api_url": current_settings.api_url,
        "environment": current_settings.environment,
        "max_retries": current_settings.max_retries,
    }


def initialize_server() -> None:
    """Validate configuration and register all tools and resources."""
    current_settings = get_settings()
    logger.info("Initializing Hotel Mania MCP server...")
    logger.info(f"Version: {__version__}")
    logger.info(f"Environment: {current_settings.environment}")

    missing_settings = current_settings.validate_required_settings()
    if missing_settings:
        error_msg = (
            f"Missing required environment variables: {', '.join(missing_settings)}"
        )
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    logger.info("Registering MCP tools...")
    register_auth_tools(app)
    register_room_tools(app)
    register_menu_tools(app)
    register_booking_tools(app)
    register_health_resources(app)
    logger.info("Server initialization completed successfully")


def main() -> None:
    """Main entry point for the MCP server."""
    try:
        setup_logging(get_settings())
        initialize_server()
        logger.info("Starting FastMCP server...")
        app.run()

    except KeyboardInterrupt:
        logger.info("Server shutdown requested")

    except ConfigurationError as e:
        logger.error(f"Server startup failed: {e}")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Unexpected server error: {e}", exc_info=True)
        sys.exit(1)

    finally:
        asyncio.run(close_api_client())
        logger.info("Server shutdown complete")


if __name__ == "__main__":
    main()
