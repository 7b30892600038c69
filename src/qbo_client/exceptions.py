"""
Exceptions raised by the QuickBooks Online client.

Validation problems are never raised; models return them as lists of
``FieldError``. Everything here is either a local configuration problem
or a failure reported by the Intuit API.
"""

from typing import Any, Optional


class QuickbooksError(Exception):
    """Base class for every error raised by qbo_client."""


class MissingRealmError(QuickbooksError):
    """Raised when a service has no realm (company) id to build a URL with."""

    def __init__(self, message: str = "Missing required realm id") -> None:
        super().__init__(message)


class IntuitRequestException(QuickbooksError):
    """
    The API answered with an error.

    Carries the parsed fault details plus the raw request and response
    bodies so callers can log exactly what was exchanged.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        detail: str = "",
        type: Optional[str] = None,
        element: Optional[str] = None,
        status_code: Optional[int] = None,
        request_xml: Any = None,
        response_xml: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.detail = detail
        self.type = type
        self.element = element
        self.status_code = status_code
        self.request_xml = request_xml
        self.response_xml = response_xml

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(status_code={self.status_code!r}, "
            f"code={self.code!r}, message={self.message!r})"
        )


class AuthorizationFailure(IntuitRequestException):
    """401 - the access token was rejected."""


class Forbidden(IntuitRequestException):
    """403 - the token is valid but may not touch this resource."""


class ServiceUnavailable(IntuitRequestException):
    """503/504 - Intuit is down or throttling."""
