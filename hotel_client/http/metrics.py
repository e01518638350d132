"""
Request metrics and health monitoring for the Hotel Mania API client.
"""

import asyncio
from collections import defaultdict, deque
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import BaseModel, Field


class RequestMetrics(BaseModel):
    """Metrics for API request monitoring."""

    method: str
    endpoint: str
    operation: str = ""
    status_code: int | None = None
    duration_ms: float
    retry_count: int = 0
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    error_type: str | None = None


class HealthMonitor:
    """Monitor API client health and collect metrics."""

    def __init__(self, max_history: int = 1000) -> None:
        """
        Initialize health monitor.

        Args:
            max_history: Maximum number of requests to track
        """
        self.max_history = max_history
        self._request_history: deque = deque(maxlen=max_history)
        self._error_counts: dict[str, int] = defaultdict(int)
        self._status_code_counts: dict[int, int] = defaultdict(int)
        self._endpoint_stats: dict[str, dict[str, Any]] = defaultdict(
            lambda: {
                "count": 0,
                "total_duration": 0.0,
                "error_count": 0,
                "retry_count": 0,
                "avg_duration": 0.0,
            }
        )
        self._lock = asyncio.Lock()

    async def record_request(self, metrics: RequestMetrics) -> None:
        """Record request metrics."""
        async with self._lock:
            self._request_history.append(metrics)

            if metrics.error_type:
                self._error_counts[metrics.error_type] += 1

            if metrics.status_code:
                self._status_code_counts[metrics.status_code] += 1

            endpoint_key = f"{metrics.method} {metrics.endpoint}"
            stats = self._endpoint_stats[endpoint_key]
            stats["count"] += 1
            stats["total_duration"] += metrics.duration_ms
            stats["retry_count"] += metrics.retry_count
            if metrics.error_type:
                stats["error_count"] += 1
            stats["avg_duration"] = stats["total_duration"] / stats["count"]

    @property
    def history(self) -> list[RequestMetrics]:
        return list(self._request_history)

    def get_health_status(self) -> dict[str, Any]:
        """Get comprehensive health status."""
        now = datetime.now(UTC)
        recent_window = now - timedelta(minutes=5)

        recent_requests = [
            req for req in self._request_history if req.timestamp >= recent_window
        ]
        recent_request_count = len(recent_requests)

        recent_errors = sum(1 for req in recent_requests if req.error_type)
        error_rate = (
            (recent_errors / recent_request_count) if recent_request_count > 0 else 0
        )

        if recent_requests:
            avg_response_time = sum(req.duration_ms for req in recent_requests) / len(
                recent_requests
            )
        else:
            avg_response_time = 0

        health_status = "healthy"
        if error_rate > 0.1:
            health_status = "degraded"
        elif error_rate > 0.05:
            health_status = "warning"

        return {
            "status": health_status,
            "total_requests": len(self._request_history),
            "recent_requests": recent_request_count,
            "error_rate": error_rate,
            "avg_response_time_ms": avg_response_time,
            "error_counts": dict(self._error_counts),
            "status_code_counts": dict(self._status_code_counts),
            "top_endpoints": dict(
                sorted(
                    self._endpoint_stats.items(),
                    key=lambda x: x[1]["count"],
                    reverse=True,
                )[:10]
            ),
            "timestamp": now.isoformat(),
        }
