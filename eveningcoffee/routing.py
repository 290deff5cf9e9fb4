"""
Evening Coffee Backend - Guarded Routes
=========================================

What:  A FastAPI route class that turns any exception raised by a JSON endpoint
       into that endpoint's own `{success: false, error}` 500 response.
How:   Endpoints declare their failure text with @on_failure(...). GuardedRoute
       wraps the request handler FastAPI builds for them (dependency solving
       included), so a missing field and a bug in the handler end up in the
       same place.

    @router.get("/menu", response_model=MenuResponse)
    @on_failure("Menu API", "Failed to load menu")
    async def get_menu(): ...

Endpoints without @on_failure are passed through untouched; their exceptions
reach ErrorFallbackMiddleware instead.

The module also provides `parsed_body`, the dependency POST handlers use to
read JSON or URL-encoded bodies. Bodies are decoded before the guarded region,
so an undecodable body reaches ErrorFallbackMiddleware instead of the
endpoint's failure text.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Coroutine, Optional, TypeVar

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException
from starlette.responses import Response

from eveningcoffee.middleware.request_id import request_id_var
from eveningcoffee.schemas.cafe import FailureResponse

logger = logging.getLogger(__name__)


class MalformedBodyError(ValueError):
    """A JSON body that parsed but is neither an object nor an array."""


F = TypeVar("F", bound=Callable[..., Any])


@dataclass(frozen=True)
class RouteFailure:
    """How a guarded endpoint reports failure: log label and client-facing error."""

    label: str
    error: str


def on_failure(label: str, error: str) -> Callable[[F], F]:
    """Attach a RouteFailure to an endpoint function without wrapping it."""

    def decorator(endpoint: F) -> F:
        endpoint.route_failure = RouteFailure(label=label, error=error)  # type: ignore[attr-defined]
        return endpoint

    return decorator


BODY_METHODS = {"POST", "PUT", "PATCH"}


class GuardedRoute(APIRoute):
    """
    APIRoute that applies the endpoint's RouteFailure to unexpected errors.

    For body-carrying methods the request body is decoded before the guarded
    region. A body that cannot be decoded is not the endpoint's failure: the
    exception escapes to ErrorFallbackMiddleware, which answers with the
    generic {"error": "Internal server error"}.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()
        failure: Optional[RouteFailure] = getattr(self.endpoint, "route_failure", None)
        if failure is None:
            return handler

        reads_body = bool(self.methods & BODY_METHODS)

        async def guarded_handler(request: Request) -> Response:
            if reads_body:
                request.state.parsed_body = await read_body(request)
            try:
                return await handler(request)
            except HTTPException:
                raise
            except Exception as exc:
                logger.error(
                    "[%s] %s error: %s",
                    request_id_var.get(""),
                    failure.label,
                    str(exc),
                    exc_info=True,
                )
                return JSONResponse(
                    status_code=500,
                    content=FailureResponse(error=failure.error).model_dump(),
                )

        return guarded_handler


async def read_body(request: Request) -> Any:
    """
    Decode the request body the way the website forms send it.

    - application/json (and +json types): a JSON object or array;
      json.JSONDecodeError on malformed input, MalformedBodyError for a
      bare scalar such as `"hi"` or `42`
    - application/x-www-form-urlencoded: flat dict of fields
    - empty body or anything else: {}
    """
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if media_type == "application/json" or media_type.endswith("+json"):
        raw = await request.body()
        if not raw.strip():
            return {}
        body = json.loads(raw)
        if not isinstance(body, (dict, list)):
            raise MalformedBodyError(
                f"JSON body must be an object or array, got {type(body).__name__}"
            )
        return body

    if media_type == "application/x-www-form-urlencoded":
        form = await request.form()
        return dict(form)

    return {}


async def parsed_body(request: Request) -> Any:
    """Dependency: the body decoded by GuardedRoute, or decoded now."""
    if hasattr(request.state, "parsed_body"):
        return request.state.parsed_body
    return await read_body(request)
