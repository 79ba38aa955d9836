"""Error taxonomy for the portal endpoints.

Every error raised by a service or endpoint derives from ``PortalError`` and
carries the HTTP status it should be surfaced with. Rendering the body is left
to the endpoint module, since the contact and maintenance endpoints expose
different error shapes to the browser client.
"""

from typing import Iterable, List, Optional

from fastapi import status

from condo_portal.models.errors import FieldError


class PortalError(Exception):
    """Base exception for portal request failures."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def headers(self) -> Optional[dict]:
        return None


class ValidationError(PortalError):
    """Request payload failed one or more field constraints."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, errors: Optional[Iterable[FieldError]] = None):
        super().__init__(message)
        self.errors: List[FieldError] = list(errors or [])

    @property
    def fields(self) -> List[str]:
        return [error.field for error in self.errors]


class MissingFieldError(ValidationError):
    """A required field was absent or empty."""

    def __init__(self, field: str, message: str):
        super().__init__(message, [FieldError(field=field, message=message)])
        self.field = field


class MethodNotAllowedError(PortalError):
    """Unsupported HTTP verb on a known route."""

    status_code = status.HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self, method: str, allowed: Iterable[str]):
        self.method = method.upper()
        self.allowed = list(allowed)
        super().__init__(f"Method {self.method} Not Allowed")

    @property
    def headers(self) -> Optional[dict]:
        return {"Allow": ", ".join(self.allowed)}


class InternalError(PortalError):
    """Unexpected failure while handling a request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
