"""
Error normalization for the service facades.

Every facade failure is funnelled through normalize_error so callers only
ever see NormalizedError, whatever went wrong underneath.
"""

import logging
from typing import Any

from hotel_client.utils.exceptions import NormalizedError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def extract_error_message(error: BaseException) -> str:
    """
    Pick the best available message for an error.

    Precedence: server ``error`` string, server ``message`` string, the
    exception's own message, then a generic fallback.
    """
    response_data: Any = getattr(error, "response_data", None)
    if isinstance(response_data, dict):
        for key in ("error", "message"):
            value = response_data.get(key)
            if isinstance(value, str) and value:
                return value

    message = getattr(error, "message", None) or str(error)
    return message or GENERIC_ERROR_MESSAGE


def normalize_error(error: BaseException, context: str = "") -> NormalizedError:
    """Convert any failure into the facade error shape."""
    normalized = NormalizedError(
        extract_error_message(error),
        status_code=getattr(error, "status_code", None),
        context=context,
    )
    logger.debug(
        f"API Error in {context or 'unknown operation'}: {normalized.message}",
        extra=normalized.to_dict(),
    )
    return normalized
