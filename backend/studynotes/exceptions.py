"""
Mini Study Notes Backend — Custom Exception Hierarchy
======================================================

What:  Application-specific exceptions for the precondition chains and the store.
Why:   The service raises these instead of building HTTP responses itself;
       global exception handlers (registered in main.py) turn them into
       responses with the right status code.
How:   Each exception carries a message (safe for clients) and an optional
       context dict (logged, never returned).

Exception Hierarchy:
    StudyNotesError (base)      → 500 Internal Server Error
    ├── BadRequestError         → 400 Bad Request, plain-text reason
    │   └── DuplicateUserError  → 400 (store-level uniqueness violation)
    ├── NotFoundError           → 404 Not Found, plain-text reason
    └── DatabaseError           → 500 Internal Server Error

Status mapping note:
    A missing user is a 404 on the top-level user endpoints (get, delete) but
    a 400 on the nested subject/note endpoints. Clients depend on this split.
"""

from typing import Any, Dict, Optional


class StudyNotesError(Exception):
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


class BadRequestError(StudyNotesError):
    """
    Raised when a request fails its precondition chain.

    When:    Duplicate username/email/subject name, or a missing user or
             subject on a nested endpoint.
    HTTP:    400 Bad Request. The message is the response body and may be
             empty (list endpoints answer with an empty 400).
    """

    def __init__(
        self,
        message: str = "",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DuplicateUserError(BadRequestError):
    """
    Raised by a repository when an insert violates username/email uniqueness.

    The service checks uniqueness before inserting, so this only surfaces when
    two requests race to create the same user.
    """

    def __init__(
        self,
        message: str = "Username or Email already taken.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(StudyNotesError):
    """
    Raised when a top-level user lookup or delete finds nothing.

    HTTP:    404 Not Found. An empty message yields an empty body.
    """

    def __init__(
        self,
        message: str = "",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(StudyNotesError):
    """
    Raised when store operations fail unexpectedly.

    Security Note:
        The message returned to the client is always generic. SQL text,
        constraint names and driver errors go to the server log only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
