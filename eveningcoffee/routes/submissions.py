"""
Evening Coffee Backend - Submission Route Handlers
====================================================

What:  POST {prefix}/contact and POST {prefix}/reservation.
Who:   Called by the contact and reservation forms on the website.

Request Flow:
    1. GuardedRoute decodes JSON or URL-encoded form data ({} when absent);
       an undecodable body goes straight to ErrorFallbackMiddleware
    2. SubmissionService logs the submission and builds the acknowledgement
    3. Any failure in step 2 becomes a 500 `{success: false, error}` body
"""

from typing import Any

from fastapi import APIRouter, Depends, Request

from eveningcoffee.routing import GuardedRoute, on_failure, parsed_body
from eveningcoffee.schemas.cafe import (
    FailureResponse,
    ReservationResponse,
    SubmissionResponse,
)
from eveningcoffee.services.submission_service import SubmissionService

router = APIRouter(tags=["Submissions"], route_class=GuardedRoute)


def get_submission_service(request: Request) -> SubmissionService:
    """The SubmissionService created by the application factory."""
    return request.app.state.submission_service


@router.post(
    "/contact",
    response_model=SubmissionResponse,
    responses={500: {"description": "Submission failed", "model": FailureResponse}},
    summary="Send a contact-form message",
)
@on_failure("Contact form", "Failed to send message. Please try again.")
async def submit_contact(
    payload: Any = Depends(parsed_body),
    service: SubmissionService = Depends(get_submission_service),
) -> SubmissionResponse:
    """
    Accept `{name, email, message}`, log it, and thank the sender.

    Nothing is stored or mailed. A payload without a string `message` is
    reported as a generic failure, not as a validation error.
    """
    return service.submit_contact(payload)


@router.post(
    "/reservation",
    response_model=ReservationResponse,
    responses={500: {"description": "Reservation failed", "model": FailureResponse}},
    summary="Request a table reservation",
)
@on_failure("Reservation", "Failed to make reservation. Please try again.")
async def submit_reservation(
    payload: Any = Depends(parsed_body),
    service: SubmissionService = Depends(get_submission_service),
) -> ReservationResponse:
    """Accept any reservation fields, log them, and return a reservation id."""
    return service.submit_reservation(payload)
