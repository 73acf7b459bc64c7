"""
HR API Backend — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions raised before a request reaches a service.
How:   Each exception carries a message and optional context dict. Global
       exception handlers (registered in main.py) turn them into JSON responses.

Exception Hierarchy:
    HRApiError (base)
    └── ValidationError   → 400 Bad Request (client can fix)

Not-found is deliberately absent: services report missing records with a
`None` / `False` return value and controllers answer 404 themselves. Store
failures are never wrapped; SQLAlchemy exceptions reach the global handlers
as-is.
"""

from typing import Any, Dict, Optional


class HRApiError(Exception):
    """
    Base exception for all HR API application errors.

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


class ValidationError(HRApiError):
    """
    Raised when a request section fails its validation rules.

    HTTP:    400 Bad Request

    The message is already formatted for the client:

        ValidationError("body", "Branch name cannot be empty").message
        == "Validation error: Body: Branch name cannot be empty"

    Attributes:
        section: Which part of the request failed ("body", "params", "query")
        detail:  The failing rule's own message, without the prefix
        field:   Offending field name, when the failure is field-specific
    """

    def __init__(
        self,
        section: str,
        detail: str,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["section"] = section
        if field:
            ctx["field"] = field
        super().__init__(
            message=f"Validation error: {section.capitalize()}: {detail}",
            context=ctx,
        )
        self.section = section
        self.detail = detail
        self.field = field
