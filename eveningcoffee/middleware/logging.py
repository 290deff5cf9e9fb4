"""
Evening Coffee Backend - Request Logging Middleware
=====================================================

What:  One access-log line per HTTP request, tagged with the café instance.
How:   Measures the time spent below this middleware and logs the app id,
       method, path, status, duration, request id and client ip on the
       `eveningcoffee.access` logger. Several embedded instances can share a
       process and a log stream; the app id tells their lines apart.

Log level by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Only this instance's own health endpoint ({api_base}/health) is skipped.
A static path that merely ends in "/health" is logged like any other request.
Request bodies are never logged here; the submission service decides what to
record about form contents.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from eveningcoffee.middleware.request_id import request_id_var

logger = logging.getLogger("eveningcoffee.access")


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log for one café app; the health endpoint stays quiet."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        state = request.app.state
        if request.url.path == f"{state.api_base}/health":
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        self._log(request, response.status_code, duration_ms, state.app_id)
        return response

    @staticmethod
    def _log(request: Request, status: int, duration_ms: float, app_id: str) -> None:
        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")

        logger.log(
            level_for_status(status),
            "[%s] %s %s %d %.1fms [%s] from %s",
            app_id,
            request.method,
            request.url.path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "app_id": app_id,
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
