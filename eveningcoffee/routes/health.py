"""
Evening Coffee Backend - Health Check Route
=============================================

What:  GET {prefix}/health, a liveness check for load balancers and the host
       server that embeds this app.
How:   Reports the identifier the app was built with, plus name and version.
       There is no database or upstream service to check.
"""

from fastapi import APIRouter, Request

from eveningcoffee import __version__
from eveningcoffee.routing import GuardedRoute
from eveningcoffee.schemas.cafe import HealthResponse

router = APIRouter(tags=["Health"], route_class=GuardedRoute)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    return HealthResponse(app_id=request.app.state.app_id, version=__version__)
