"""
PetClinic Backend - Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for failures that escape a request.
How:   Each exception carries a user-facing message and an optional context
       dict. Handlers registered in main.py turn them into HTML error pages
       with the matching HTTP status code.
Who:   Raised by services and repositories; caught by the global handlers.

Form validation problems are NOT exceptions: they are collected in a
BindingResult and the originating form is rendered again.

Exception Hierarchy:
    PetClinicError (base)     → 500 Internal Server Error
    ├── NotFoundError         → 404 Not Found
    └── DatabaseError         → 500 Internal Server Error (generic message)
"""

from typing import Any, Dict, Optional


class PetClinicError(Exception):
    """
    Base exception for all PetClinic application errors.

    Attributes:
        message:  User-facing error description (safe to render)
        context:  Additional debug info (logged, never rendered)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(PetClinicError):
    """
    Raised when a requested record does not exist.

    When:    /owners/{owner_id}, /owners/{owner_id}/edit with an unknown id.
    HTTP:    404 Not Found

    Repositories return None for missing rows; the service layer converts
    that None into this exception.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource.capitalize()} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(PetClinicError):
    """
    Raised when a repository operation fails unexpectedly.

    HTTP:    500 Internal Server Error

    The rendered message is always generic. SQL text, constraint names and
    driver errors stay in the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
