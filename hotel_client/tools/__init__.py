"""MCP tools exposing the Hotel Mania facades."""

from typing import Any

from hotel_client.models.result import Err, Ok, Result


def tool_response(result: Result, **extra: Any) -> dict[str, Any]:
    """Convert a facade result into the tool response dictionary."""
    match result:
        case Ok(payload):
            return {"success": True, "data": payload, **extra}
        case Err(error):
            return {
                "success": False,
                "error": error.message,
                "status_code": error.status_code,
                "context": error.context,
                **extra,
            }
