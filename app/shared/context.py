"""Request-scoped context using contextvars.

The request ID and correlation ID middleware bind the IDs here so that
log records written anywhere during the request (the participant search
logs one line per sub-query) carry them.
"""

import logging
from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def bind_request_id(request_id: str) -> Token[str | None]:
    """Bind the request ID for the current task; pass the token to reset."""
    return _request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    _request_id.reset(token)


def get_request_id() -> str | None:
    return _request_id.get()


def bind_correlation_id(correlation_id: str) -> Token[str | None]:
    """Bind the correlation ID for the current task; pass the token to reset."""
    return _correlation_id.set(correlation_id)


def reset_correlation_id(token: Token[str | None]) -> None:
    _correlation_id.reset(token)


def get_correlation_id() -> str | None:
    return _correlation_id.get()


class RequestContextFilter(logging.Filter):
    """Add request_id and correlation_id attributes to every log record.

    Outside a request both are "-" so the log format never fails.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        record.correlation_id = get_correlation_id() or "-"
        return True
