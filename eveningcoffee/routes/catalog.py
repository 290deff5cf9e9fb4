"""
Evening Coffee Backend - Catalog Route Handlers
=================================================

What:  GET {prefix}/menu and GET {prefix}/info.
How:   Return the constants held by CatalogService.
"""

from fastapi import APIRouter

from eveningcoffee.routing import GuardedRoute, on_failure
from eveningcoffee.schemas.cafe import FailureResponse, MenuResponse, StoreInfoResponse
from eveningcoffee.services.catalog import catalog_service

router = APIRouter(tags=["Catalog"], route_class=GuardedRoute)


@router.get(
    "/menu",
    response_model=MenuResponse,
    responses={500: {"description": "Menu unavailable", "model": FailureResponse}},
    summary="List the café menu",
)
@on_failure("Menu API", "Failed to load menu")
async def get_menu() -> MenuResponse:
    return MenuResponse(menu=catalog_service.list_menu())


@router.get(
    "/info",
    response_model=StoreInfoResponse,
    responses={500: {"description": "Store info unavailable", "model": FailureResponse}},
    summary="Store address, contact details and opening hours",
)
@on_failure("Store info API", "Failed to load store information")
async def get_store_info() -> StoreInfoResponse:
    return StoreInfoResponse(info=catalog_service.get_store_info())
