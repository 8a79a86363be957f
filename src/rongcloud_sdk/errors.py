"""
RongCloud error types.

Every operation either returns its result or raises exactly one of
ClientValidationError, RemoteAPIError or TransportError. All three derive
from RongCloudError and carry the protocol they came from.
"""

from enum import Enum
from typing import Optional

PARAM_ERROR = 1002


class ErrorOrigin(str, Enum):
    LEGACY = "legacy"
    REST = "rest"


class RongCloudError(Exception):
    def __init__(
        self,
        code: Optional[int],
        message: str,
        origin: ErrorOrigin = ErrorOrigin.LEGACY,
        request_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.origin = origin
        self.request_id = request_id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}, origin={self.origin.value!r})"


class ClientValidationError(RongCloudError):
    """Caller input was rejected locally; no request was sent."""

    def __init__(self, message: str, origin: ErrorOrigin = ErrorOrigin.LEGACY, code: int = PARAM_ERROR):
        super().__init__(code, message, origin)


class RemoteAPIError(RongCloudError):
    """The platform answered with a non-success envelope code."""

    def __init__(
        self,
        code: int,
        message: str,
        origin: ErrorOrigin = ErrorOrigin.LEGACY,
        request_id: Optional[str] = None,
    ):
        super().__init__(code, message, origin, request_id)


class TransportError(RongCloudError):
    """The call could not complete or its response could not be read."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        origin: ErrorOrigin = ErrorOrigin.LEGACY,
        request_id: Optional[str] = None,
    ):
        super().__init__(None, message, origin, request_id)
        self.cause = cause
