"""
Evening Coffee Backend - Catalog Service
==========================================

What:  The café's fixed menu and store information.
How:   Module-level constants built once at import; the service hands out the
       same immutable (frozen Pydantic) objects on every call.
Who:   Called by the GET {prefix}/menu and GET {prefix}/info handlers.

Nothing here is persisted or editable at runtime. Changing the menu means
changing this file and redeploying.
"""

from typing import List, Tuple

from eveningcoffee.schemas.cafe import MenuItem, StoreInfo

WEEKDAYS: Tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

MENU: Tuple[MenuItem, ...] = (
    MenuItem(
        id=1,
        name="Turkish Coffee",
        description="Traditional Turkish coffee served with Turkish delight",
        price=4.50,
        category="Traditional",
    ),
    MenuItem(
        id=2,
        name="Espresso",
        description="Rich and bold single shot of premium espresso",
        price=3.00,
        category="Espresso",
    ),
    MenuItem(
        id=3,
        name="Latte",
        description="Smooth espresso with steamed milk and light foam",
        price=5.50,
        category="Milk Coffee",
    ),
    MenuItem(
        id=4,
        name="Cappuccino",
        description="Perfect balance of espresso, steamed milk, and foam",
        price=5.00,
        category="Milk Coffee",
    ),
    MenuItem(
        id=5,
        name="Americano",
        description="Espresso shots with hot water for a clean taste",
        price=3.50,
        category="Espresso",
    ),
    MenuItem(
        id=6,
        name="Mocha",
        description="Espresso with chocolate syrup and steamed milk",
        price=6.00,
        category="Specialty",
    ),
)

STORE_INFO = StoreInfo(
    name="Evening Coffee",
    address="123 Coffee Street, Downtown District, City 12345",
    phone="+1 (555) 123-4567",
    email="hello@eveningcoffee.com",
    hours={day: "7:00 AM - 10:00 PM" for day in WEEKDAYS},
    established=2018,
    social={
        "facebook": "#",
        "instagram": "#",
        "twitter": "#",
        "linkedin": "#",
    },
)


class CatalogService:
    """Read-only access to the menu and store info."""

    def list_menu(self) -> List[MenuItem]:
        return list(MENU)

    def get_store_info(self) -> StoreInfo:
        return STORE_INFO


catalog_service = CatalogService()
