"""
Request Context Middleware.

Each request gets an id (the caller's X-Request-ID, or a fresh uuid4) and
a source label taken from X-Frontend-ID. Both are stored on request.state,
where the exception handlers read them, and bound to structlog contextvars
so every log line written while the request runs carries them. The
response echoes X-Request-ID and reports X-Response-Time.
"""

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from notes_api.core.logging import get_logger

logger = get_logger(__name__)

# X-Frontend-ID values; the CLI client sends "cli"
KNOWN_SOURCES = frozenset({"web", "cli", "api"})
UNKNOWN_SOURCE = "unknown"


def resolve_source(header_value: str | None) -> str:
    """Normalized source label, or "unknown" for anything unrecognized."""
    source = (header_value or "").strip().lower()
    return source if source in KNOWN_SOURCES else UNKNOWN_SOURCE


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags, times and optionally logs every request."""

    def __init__(self, app: ASGIApp, log_requests: bool = True) -> None:
        super().__init__(app)
        self.log_requests = log_requests

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        source = resolve_source(request.headers.get("X-Frontend-ID"))
        request.state.request_id = request_id
        request.state.source = source

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            source=source,
            method=request.method,
            path=request.url.path,
        )
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            # The catch-all handler turns this into the 500 envelope
            logger.error(
                "Request raised",
                extra={"duration_ms": _elapsed_ms(start), "error_type": type(exc).__name__},
            )
            raise
        else:
            duration_ms = _elapsed_ms(start)
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms}ms"
            if self.log_requests:
                logger.info(
                    "Request completed",
                    extra={"status_code": response.status_code, "duration_ms": duration_ms},
                )
            return response
        finally:
            structlog.contextvars.clear_contextvars()
