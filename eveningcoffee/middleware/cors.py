"""
Evening Coffee Backend - CORS Middleware
==========================================

What:  Permissive Cross-Origin Resource Sharing for the website's API.
How:   Sets fixed Access-Control-* headers on every response. OPTIONS requests
       to any path are answered here with an empty 200 and go no further.

Starlette's CORSMiddleware only short-circuits "real" preflights (OPTIONS with
Origin and Access-Control-Request-Method) and echoes request headers back. The
site's clients expect the exact header values below on every response, and an
empty 200 for any OPTIONS, so this middleware does just that.
"""

from typing import Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": (
        "Origin, X-Requested-With, Content-Type, Accept, Authorization"
    ),
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Adds CORS_HEADERS to every response and short-circuits OPTIONS."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
