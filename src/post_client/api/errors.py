"""
API Error Types

The closed set of failure kinds returned (never raised) by the API client.
Each kind is an exception subclass so it keeps a traceback and a cause
chain, and so the top-level handler can re-raise it when it chooses to.
"""

from typing import Optional, Union


class APIError(Exception):
    """Base class for every failure the API client can return."""

    name = "APIError"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.__cause__ = cause

    @property
    def cause(self) -> Optional[BaseException]:
        """The underlying failure, if any."""
        return self.__cause__

    def __repr__(self) -> str:
        return f"{self.name}({self.message!r})"


class StatusError(APIError):
    """The service answered with a non-2xx status."""

    name = "StatusError"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class JsonError(APIError):
    """The response body was not valid JSON."""

    name = "JsonError"


class ParseError(APIError):
    """The JSON body did not match the expected schema."""

    name = "ParseError"


class NetworkError(APIError):
    """Transport-level failure: connection refused, timeout, protocol error."""

    name = "NetworkError"


class ValidationError(APIError):
    """Caller-supplied input failed schema validation."""

    name = "ValidationError"


class UserDoesNotExistError(APIError):
    """The referenced user id has no record."""

    name = "UserDoesNotExistError"

    def __init__(self, user_id: int):
        super().__init__(f"UserId: {user_id} does not exist")
        self.user_id = user_id


# Failure unions per operation
FetchError = Union[StatusError, JsonError, ParseError, NetworkError]
CreatePostError = Union[
    UserDoesNotExistError,
    StatusError,
    JsonError,
    NetworkError,
    ValidationError,
    ParseError,
]
