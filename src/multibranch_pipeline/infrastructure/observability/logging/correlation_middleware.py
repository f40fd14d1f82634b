"""Pure ASGI middleware for correlation ID propagation via structlog contextvars.

Injects correlation_id, endpoint and method into structlog context for every
HTTP request and logs request completion with its duration. Failed requests
(an exception or a 5xx status) are logged at error level with an error block.
"""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, unbind_contextvars

logger = structlog.get_logger()

CORRELATION_HEADER = b"x-correlation-id"
_REQUEST_KEYS = ("correlation_id", "context_endpoint", "context_method")


class CorrelationMiddleware:
    """ASGI middleware that binds a correlation ID to structlog contextvars."""

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        await self._handle_request(scope, receive, send)

    async def _handle_request(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        correlation_id = _extract_header(scope, CORRELATION_HEADER) or str(uuid4())
        # Request keys only; the process-wide pipeline context stays bound.
        bind_contextvars(
            correlation_id=correlation_id,
            context_endpoint=str(scope.get("path", "/")),
            context_method=str(scope.get("method", "UNKNOWN")),
        )
        http_status = 500
        start = time.perf_counter()

        async def _send_with_correlation(message: dict[str, Any]) -> None:
            nonlocal http_status
            if message.get("type") == "http.response.start":
                http_status = message.get("status", 500)
                headers = list(message.get("headers", []))
                headers.append((CORRELATION_HEADER, correlation_id.encode("latin-1")))
                message = {**message, "headers": headers}
            await send(message)

        error_fields: dict[str, Any] = {}
        try:
            await self.app(scope, receive, _send_with_correlation)
        except Exception as exc:
            error_fields = {"error_type": type(exc).__name__, "error_details": str(exc)}
            raise
        finally:
            if not error_fields and http_status >= 500:
                error_fields = {"error_type": "HTTPServerError", "error_details": f"HTTP {http_status}"}
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            log = logger.error if error_fields else logger.info
            log(
                "Request processed",
                processing_status="SUCCESS" if http_status < 400 else "ERROR",
                processing_duration_ms=duration_ms,
                processing_http_status=http_status,
                context_component="http",
                **error_fields,
            )
            unbind_contextvars(*_REQUEST_KEYS)


def _extract_header(scope: dict[str, Any], name: bytes) -> str | None:
    """Extract a header value from ASGI scope (case-insensitive)."""
    headers: list[tuple[bytes, bytes]] = scope.get("headers", [])
    lower_name = name.lower()
    for key, value in headers:
        if key.lower() == lower_name:
            return value.decode("latin-1")
    return None
