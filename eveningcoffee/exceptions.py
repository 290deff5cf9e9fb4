"""
Evening Coffee Backend - Custom Exception Hierarchy
=====================================================

What:  Application-specific exceptions with a message and optional context.
How:   Global exception handlers (registered in main.py) catch these and return
       structured JSON error responses with the matching HTTP status code.

Exception Hierarchy:
    EveningCoffeeError (base)
    └── NotFoundError            → 404 Not Found

Everything else a route raises is an "internal error": the JSON endpoints turn
it into their own `{success: false, error}` body (see routing.py), and anything
escaping further up is answered by ErrorFallbackMiddleware.
"""

from typing import Any, Dict, Optional


class EveningCoffeeError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(EveningCoffeeError):
    """
    Raised when a requested static resource or route does not exist.

    When:    GET for a path with no matching file under the static root, a
             path that resolves outside of it, or a non-GET request to a path
             no API route claims.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
