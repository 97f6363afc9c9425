"""
Store Admin Backend — Custom Exception Hierarchy
=================================================

What:  Typed errors for every way a request can be turned away.
How:   Each exception carries the plain-text message sent to the client,
       the HTTP status code, and an optional context dict that is logged
       but never returned. Handlers registered in main.py serialize them.
Who:   Raised by services (validation, ownership guard, entity pipeline).

Exception Hierarchy:
    StoreAdminError (base)
    ├── UnauthenticatedError  → 401 "Unauthorized"
    ├── ValidationError       → 422 field-specific message
    ├── ForbiddenError        → 403 "Unauthorized"
    └── InternalError         → 500 "Internal Error"
"""

from typing import Any, Dict, Optional


class StoreAdminError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:      Plain-text response body (safe to return to the client)
        status_code:  HTTP status the transport layer responds with
        context:      Additional debug info (logged, NOT returned to client)
    """

    status_code: int = 500
    default_message: str = "Internal Error"

    def __init__(
        self,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.context = context or {}
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        """Machine-readable error kind, e.g. 'validation_error'."""
        return _KINDS.get(type(self), "store_admin_error")


class UnauthenticatedError(StoreAdminError):
    """
    No authenticated subject on a request that requires one.

    HTTP: 401. Checked before the request body is even read.
    """

    status_code = 401
    default_message = "Unauthorized"


class ValidationError(StoreAdminError):
    """
    A required field is missing or empty.

    HTTP: 422. Only the first failing field is reported; `field` names it
    (e.g. "label", "images", "storeId").
    """

    status_code = 422
    default_message = "Validation failed"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ForbiddenError(StoreAdminError):
    """
    The subject is authenticated but does not own the target store.

    HTTP: 403. The body deliberately matches the 401 body.
    """

    status_code = 403
    default_message = "Unauthorized"


class InternalError(StoreAdminError):
    """
    Unexpected failure caught at a handler boundary (database error,
    malformed JSON, bug). Details live in `context` and the server log.

    HTTP: 500 with the literal body "Internal Error".
    """

    status_code = 500
    default_message = "Internal Error"


_KINDS = {
    StoreAdminError: "store_admin_error",
    UnauthenticatedError: "unauthenticated",
    ValidationError: "validation_error",
    ForbiddenError: "forbidden",
    InternalError: "internal_error",
}
