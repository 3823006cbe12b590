# /app/core/exceptions.py

"""
The error taxonomy shared by every service in the application.

Services raise one of these; the handlers registered in `app.main` turn them
into a JSON body of the form ``{"error": <message>, "category": <category>}``.
Routers never build error responses themselves.
"""

from fastapi import status

NOT_FOUND_OR_OUT_OF_SCOPE = "not_found_or_out_of_scope"


class ServiceError(Exception):
    """Base class for all expected, user-facing failures."""

    category = "internal"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message, "category": self.category}


class UnauthenticatedError(ServiceError):
    """No session, or the session token failed verification."""

    category = "unauthenticated"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"


class ValidationError(ServiceError):
    """A required field is missing or malformed. Raised before any write."""

    category = "validation"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"

    def __init__(self, message: str = None, field: str = None):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        body = super().to_dict()
        if self.field:
            body["field"] = self.field
        return body


class NotFoundOrOutOfScopeError(ServiceError):
    """
    The row does not exist, or exists outside the caller's scope.

    Both cases share one message; a caller cannot tell them apart or probe for
    rows that belong to another school.
    """

    category = NOT_FOUND_OR_OUT_OF_SCOPE
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Record not found or not within your scope"

    def __init__(self, entity: str = None):
        message = f"{entity} not found or not within your scope" if entity else None
        super().__init__(message)


class ConflictError(ServiceError):
    """A uniqueness or referential rule would be violated."""

    category = "conflict"
    status_code = status.HTTP_409_CONFLICT
    default_message = "The request conflicts with existing data"


class InternalError(ServiceError):
    """Unexpected storage failure. The cause is logged, never returned."""
