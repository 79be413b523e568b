"""Correlation ID middleware.

Forwards X-Correlation-ID from the client, or falls back to the request ID,
so one user action can be followed across services. Raw ASGI; must run
inside RequestIDMiddleware for the fallback to apply.
"""

import uuid
from typing import Callable

from app.middleware.headers import append_header, get_header
from app.middleware.request_id import sanitize_request_id
from app.shared.context import bind_correlation_id, reset_correlation_id


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Add or forward the correlation ID on each request and response. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        raw = get_header(scope, header_name)
        if raw:
            correlation_id = sanitize_request_id(raw)
        else:
            correlation_id = scope.get("state", {}).get("request_id") or str(uuid.uuid4())
        scope.setdefault("state", {})["correlation_id"] = correlation_id

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                append_header(message, header_name, correlation_id)
            await send(message)

        token = bind_correlation_id(correlation_id)
        try:
            await app(scope, receive, send_wrapper)
        finally:
            reset_correlation_id(token)

    return asgi_app
