"""
Evening Coffee Backend - Pydantic Request/Response Schemas
===========================================================

What:  Pydantic models defining the JSON contract of the café API.
How:   Route handlers return these models; FastAPI serializes them (by alias,
       so `app_id` goes out as `appId`) and documents them in OpenAPI.

Field names follow the JSON the website front end already consumes, which is
why a few of them are camelCase on the wire.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Entities
# ══════════════════════════════════════════════════════════════════════════


class MenuItem(BaseModel):
    """One drink on the fixed café menu."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Unique menu item identifier (1-6)")
    name: str
    description: str
    price: float = Field(gt=0, description="Price in store currency")
    category: str
    available: bool = True


class StoreInfo(BaseModel):
    """
    What:  Contact details, opening hours and social links of the café.
    Who:   Returned by GET {prefix}/info.

    `hours` maps lowercase weekday names (monday..sunday) to a display range
    such as "7:00 AM - 10:00 PM". `social` maps platform name to URL.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    address: str
    phone: str
    email: str
    hours: Dict[str, str]
    established: int = Field(description="Year the café opened")
    social: Dict[str, str]


class ContactSubmission(BaseModel):
    """
    What:  A contact-form message.
    How:   Validated inside the guarded handler, so a bad payload becomes the
           route's generic 500 body instead of a 422 validation response.

    `message` is the only field the handler relies on (it is truncated for
    the log); name and email are logged exactly as given.
    """

    name: Any = None
    email: Any = None
    message: str


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class SubmissionResponse(BaseModel):
    """Acknowledgement for POST {prefix}/contact."""

    success: bool = True
    message: str


class ReservationResponse(BaseModel):
    """Acknowledgement for POST {prefix}/reservation."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    reservation_id: str = Field(
        alias="reservationId",
        pattern=r"^EC\d+$",
        description="Server-generated id: 'EC' followed by epoch milliseconds",
    )


class MenuResponse(BaseModel):
    success: bool = True
    menu: List[MenuItem]


class StoreInfoResponse(BaseModel):
    success: bool = True
    info: StoreInfo


class HealthResponse(BaseModel):
    """
    What:  Liveness payload returned by GET {prefix}/health.

    The service has no dependencies to check, so `status` is always "ok"
    whenever the process can answer at all.
    """

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(default="ok")
    app_id: str = Field(alias="appId", description="Identifier the app was created with")
    name: str = Field(default="Evening Coffee Website")
    version: str


class FailureResponse(BaseModel):
    """Body of a failed JSON endpoint: `{success: false, error}`."""

    success: bool = False
    error: str


class ErrorResponse(BaseModel):
    """
    What:  Error format for requests that never reached a JSON endpoint
           (missing static files).
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
