"""
Evening Coffee Backend - Error Fallback Middleware
====================================================

What:  Terminal error handler for exceptions that escape every route-level
       recovery point (unguarded routes, middleware below this one).
How:   Wraps the rest of the stack in try/except, logs the traceback, and
       responds 500 {"error": "Internal server error"} whatever the cause.

The JSON endpoints normally never get here: GuardedRoute answers their
failures with their own `{success: false, error}` bodies.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from eveningcoffee.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)


class ErrorFallbackMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                "[%s] App error on %s %s: %s",
                request_id_var.get(""),
                request.method,
                request.url.path,
                str(exc),
                exc_info=True,
            )
            return JSONResponse(
                status_code=500,
                content={"error": "Internal server error"},
            )
