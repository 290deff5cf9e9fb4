"""
Evening Coffee Backend - Submission Service
=============================================

What:  Intake for contact-form messages and table reservations.
How:   Each submission is written to a log record and then discarded. There is
       no database, mail server or CRM behind this service.
Who:   Called by POST {prefix}/contact and POST {prefix}/reservation.

Logging:
    Records go to the logger the service was constructed with (by default
    `eveningcoffee.submissions`). The application factory accepts a logger
    so a host, or a test using caplog, can route submission records wherever
    it wants without touching stdout.

Reservation IDs:
    "EC" followed by epoch milliseconds, e.g. EC1718035200123. Two requests in
    the same millisecond would collide on the raw clock, so the generator never
    hands out a value lower than or equal to the previous one.
"""

import logging
import threading
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional

from eveningcoffee.schemas.cafe import (
    ContactSubmission,
    ReservationResponse,
    SubmissionResponse,
)

DEFAULT_LOGGER_NAME = "eveningcoffee.submissions"

# Length of the contact message excerpt written to the log
MESSAGE_PREVIEW_LENGTH = 100

CONTACT_THANKS = "Thank you for your message! We'll get back to you soon."
RESERVATION_CONFIRMED = (
    "Your table has been reserved! We'll call you to confirm the details."
)


def _utc_timestamp() -> str:
    """ISO 8601 UTC timestamp with millisecond precision, e.g. 2024-06-10T15:04:05.123Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def preview_message(message: str) -> str:
    """First 100 characters of a contact message followed by an ellipsis."""
    return message[:MESSAGE_PREVIEW_LENGTH] + "..."


def spread_fields(payload: Any) -> Dict[str, Any]:
    """
    Flatten a reservation payload into loggable fields.

    Objects keep their keys; arrays and strings become index-keyed fields
    ("0", "1", ...); scalars and null contribute nothing.
    """
    if isinstance(payload, Mapping):
        return dict(payload)
    if isinstance(payload, (list, tuple, str)):
        return {str(index): value for index, value in enumerate(payload)}
    return {}


class ReservationIdGenerator:
    """
    Timestamp-derived, strictly increasing reservation ids.

    Thread Safety:
        A lock guards the last issued value, so handlers running on worker
        threads (or several event loops) still get distinct ids.
    """

    PREFIX = "EC"

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.time
        self._last_ms = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            now_ms = int(self._clock() * 1000)
            self._last_ms = max(now_ms, self._last_ms + 1)
            return f"{self.PREFIX}{self._last_ms}"


class SubmissionService:
    """
    Logs and acknowledges submissions from the website forms.

    Responsibilities:
        - submit_contact(): validate the contact payload, log a short excerpt
        - submit_reservation(): log the full payload, issue a reservation id

    Failures (for example a contact payload without a string `message`)
    propagate as exceptions; the route layer turns them into 500 responses.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        id_generator: Optional[ReservationIdGenerator] = None,
    ):
        self.logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self.id_generator = id_generator or ReservationIdGenerator()

    def submit_contact(self, payload: Mapping[str, Any]) -> SubmissionResponse:
        """
        Record a contact-form message.

        Raises:
            pydantic.ValidationError: `message` missing or not a string.
        """
        submission = ContactSubmission.model_validate(dict(payload))
        record = {
            "name": submission.name,
            "email": submission.email,
            "message": preview_message(submission.message),
            "timestamp": _utc_timestamp(),
        }
        self.logger.info("Contact form submission: %s", record, extra={"submission": record})
        return SubmissionResponse(message=CONTACT_THANKS)

    def submit_reservation(self, payload: Any) -> ReservationResponse:
        """Record a table reservation request as-is and issue its id."""
        record: Dict[str, Any] = {**spread_fields(payload), "timestamp": _utc_timestamp()}
        self.logger.info("Table reservation: %s", record, extra={"submission": record})
        return ReservationResponse(
            message=RESERVATION_CONFIRMED,
            reservation_id=self.id_generator.next_id(),
        )
