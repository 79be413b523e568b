"""Request timeout middleware.

Cancels the request if it runs longer than the configured timeout
(asyncio.wait_for). Search sub-queries have their own, shorter timeouts;
this is the outer bound for the whole request. Raw ASGI.
"""

import asyncio
import logging
from typing import Callable

from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


def TimeoutMiddleware(app: Callable, timeout_seconds: int) -> Callable:
    """Cancel request after timeout_seconds and answer 504. Raw ASGI.

    When the response has already started, the connection is left to close
    without a second response.
    """

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await asyncio.wait_for(
                app(scope, receive, send_wrapper),
                timeout=float(timeout_seconds),
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %s seconds: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if started:
                return
            response = JSONResponse(
                status_code=504,
                content={
                    "error": "GATEWAY_TIMEOUT",
                    "message": f"Request timed out after {timeout_seconds} seconds",
                    "details": {"timeout_seconds": timeout_seconds},
                },
            )
            await response(scope, receive, send)

    return asgi_app
