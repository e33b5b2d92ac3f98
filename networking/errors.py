"""
API Errors

Exception tree raised by RemoteApiService implementations.
RemoteApi catches these at its boundary and turns them into Failure results,
so callers of RemoteApi never see them raised.
"""

from typing import Optional

from networking.constants import ErrorKind


class ApiError(Exception):
    """
    Base class for every Taskie API failure.

    Attributes:
        kind: ErrorKind classification
    """

    kind = ErrorKind.UNEXPECTED

    def __init__(self, message: str, kind: Optional[ErrorKind] = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class TransportError(ApiError):
    """Connection, timeout or IO failure talking to the server"""

    kind = ErrorKind.TRANSPORT


class HttpStatusError(TransportError):
    """Server answered with a non-2xx status"""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ApiError):
    """Empty body, malformed JSON, or JSON of an unexpected shape"""

    kind = ErrorKind.DECODE


class ValidationError(ApiError):
    """A required field is missing or blank"""

    kind = ErrorKind.VALIDATION


class NotAuthenticatedError(ValidationError):
    """Authenticated call attempted without a session token"""


class EmptyResultError(ApiError):
    """Well-formed response with no data where data was expected"""

    kind = ErrorKind.EMPTY_RESULT
