"""
Base service client for the Hotel Mania API facades.

Provides request construction, JSON/multipart payload handling and the
single error-normalization path shared by every resource client.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from hotel_client.http.pipeline import ApiRequest, Pipeline
from hotel_client.http.transport import decode_body
from hotel_client.utils.errors import normalize_error
from hotel_client.utils.exceptions import HotelClientError
from hotel_client.utils.multipart import build_multipart_form
from hotel_client.utils.validators import validate_resource_id

logger = logging.getLogger(__name__)


class BaseServiceClient:
    """
    Base class for resource facades.

    Subclasses set ``prefix`` (the route prefix) and ``context_prefix`` (the
    label used in normalized errors, e.g. ``rooms``).
    """

    prefix = "/api"
    context_prefix = ""

    def __init__(self, pipeline: Pipeline) -> None:
        self.pipeline = pipeline

    def _context(self, operation: str) -> str:
        return f"{self.context_prefix}.{operation}"

    def _path(self, *segments: str) -> str:
        return "/".join([self.prefix.rstrip("/"), *segments])

    def _require_id(self, resource_id: Any, label: str, operation: str) -> str:
        try:
            return validate_resource_id(resource_id, label)
        except HotelClientError as e:
            raise normalize_error(e, self._context(operation)) from e

    async def request(
        self,
        method: str,
        path: str,
        operation: str,
        json_data: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Send a JSON request through the pipeline.

        Args:
            method: HTTP method
            path: Route path, e.g. ``/api/rooms``
            operation: Operation name used for error context
            json_data: Optional JSON body
            params: Optional query parameters

        Returns:
            Decoded response payload (``{}`` for an empty body)

        Raises:
            NormalizedError: For any failure
        """
        request = ApiRequest(
            method=method,
            path=path,
            params=params,
            json_data=json_data,
            operation=self._context(operation),
        )
        return await self._send(request)

    async def request_multipart(
        self,
        method: str,
        path: str,
        operation: str,
        data: Mapping[str, Any],
        file_fields: Iterable[str],
    ) -> Any:
        """Send a multipart request built from ``data``."""
        try:
            form = build_multipart_form(data, file_fields)
        except Exception as e:
            raise normalize_error(e, self._context(operation)) from e
        request = ApiRequest(
            method=method,
            path=path,
            form=form,
            headers={"Content-Type": "multipart/form-data"},
            operation=self._context(operation),
        )
        return await self._send(request)

    async def _send(self, request: ApiRequest) -> Any:
        try:
            response = await self.pipeline.send(request)
        except HotelClientError as e:
            raise normalize_error(e, request.operation) from e
        payload = decode_body(response)
        return {} if payload is None else payload
