"""
Fitness API — Request Context Middleware
==========================================

What:  Per-request correlation ID, access log line, and last-resort 500.
How:   One middleware wraps the whole route stack:

    1. Resolve the request ID. A client's X-Request-ID is reused when it is a
       short token; anything else (too long, spaces, control characters) is
       replaced so it can never forge log lines or bloat headers.
    2. Classify the path: /blogs/{id} → resource=blogs, id={id}.
    3. Run the app. An exception nothing else handled becomes the generic
       500 body, so the client still gets JSON and the X-Request-ID header.
    4. Log one line at INFO/WARNING/ERROR by status class.

Request bodies are never logged (user documents carry emails and phone numbers).
"""

import logging
import re
import time
import uuid
from contextvars import ContextVar
from typing import Optional, Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger("fitness_api.access")

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")

_RESOURCE_PATH = re.compile(r"^/(?P<resource>blogs|users)(?:/(?P<entity_id>[^/]+))?/?$")

UNLOGGED_PATHS = {"/health"}


def resolve_request_id(header_value: Optional[str]) -> str:
    """Client-supplied ID if it is a safe token, else a fresh 8-char one."""
    if (
        header_value
        and len(header_value) <= MAX_REQUEST_ID_LENGTH
        and _REQUEST_ID_PATTERN.match(header_value)
    ):
        return header_value
    return uuid.uuid4().hex[:8]


def classify_path(path: str) -> Tuple[str, str]:
    """(resource, entity id) for /blogs and /users paths, "-" where absent."""
    match = _RESOURCE_PATH.match(path)
    if match is None:
        return "-", "-"
    return match.group("resource"), match.group("entity_id") or "-"


def internal_error_response(rid: str) -> JSONResponse:
    """Body shared with the app-level catch-all handler in main.py."""
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again later.",
            "request_id": rid,
        },
    )


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns the request ID, logs the request, and contains stray exceptions."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request_id_var.set(rid)
        request.state.request_id = rid

        path = request.url.path
        resource, entity_id = classify_path(path)
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "[%s] Unhandled error on %s %s: %s",
                rid, request.method, path, exc,
                exc_info=True,
            )
            response = internal_error_response(rid)

        response.headers[REQUEST_ID_HEADER] = rid

        if path in UNLOGGED_PATHS:
            return response

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        client_ip = request.client.host if request.client else "unknown"
        logger.log(
            log_level,
            "%s %s %d %.1fms resource=%s id=%s [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            resource,
            entity_id,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "resource": resource,
                "entity_id": entity_id,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response
