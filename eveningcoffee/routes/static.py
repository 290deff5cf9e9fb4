"""
Evening Coffee Backend - Static File Routes
=============================================

What:  Serves the website itself: GET / returns the index page, and any other
       GET or HEAD that no API route claimed returns the file at that relative
       path. Other methods on unclaimed paths get the JSON 404.
Who:   Browsers loading the marketing site (HTML, CSS, images, scripts).

Registration order:
    This router is included after every API router, so /menu,
    /api/{id}/menu and friends always win. None of its routes are prefixed
    in embedded mode.

Security:
    - Paths are resolved against the static root; anything that escapes it
      (../, absolute paths, symlinks pointing out) is answered with 404
    - Directories are only served through their index file
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

from eveningcoffee.exceptions import NotFoundError
from eveningcoffee.schemas.cafe import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Static"])


def resolve_static_file(static_root: str, relative_path: str, index_file: str) -> Path:
    """
    Map a request path onto a file below `static_root`.

    Raises:
        NotFoundError: no such file, or the path leaves the static root.
    """
    root = Path(static_root).resolve()
    candidate = (root / relative_path.lstrip("/")).resolve()

    if candidate != root and root not in candidate.parents:
        logger.warning("Rejected static path outside root: %s", relative_path)
        raise NotFoundError(resource="file", resource_id=relative_path)

    if candidate.is_dir():
        candidate = candidate / index_file

    if not candidate.is_file():
        raise NotFoundError(resource="file", resource_id=relative_path or "/")

    return candidate


@router.api_route(
    "/",
    methods=["GET", "HEAD"],
    summary="Website home page",
    responses={404: {"description": "Index file missing", "model": ErrorResponse}},
)
async def index(request: Request) -> FileResponse:
    settings = request.app.state.settings
    return FileResponse(
        resolve_static_file(settings.static_root, settings.index_file, settings.index_file)
    )


@router.api_route(
    "/{file_path:path}",
    methods=["GET", "HEAD"],
    summary="Static website assets",
    responses={404: {"description": "File not found", "model": ErrorResponse}},
)
async def static_file(file_path: str, request: Request) -> FileResponse:
    settings = request.app.state.settings
    return FileResponse(
        resolve_static_file(settings.static_root, file_path, settings.index_file)
    )


@router.api_route(
    "/{file_path:path}",
    methods=["POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def unknown_route(file_path: str) -> None:
    raise NotFoundError(resource="route", resource_id=f"/{file_path}")
