"""
Exception hierarchy for the Ibutsu client library.

Every failure of an API call surfaces as exactly one of four families:

- ``ValidationError``: the caller misused an operation; raised before any
  network I/O happens.
- ``ResponseError``: the server answered with a status outside [200, 300).
- ``TransportError``: the request never produced a response (DNS, TLS,
  refused connection, timeout, cancellation).
- ``DecodeError``: a successful response carried a body that could not be
  decoded into the declared shape.
"""

from typing import Any, Dict, Mapping, Optional


class IbutsuClientError(Exception):
    """
    Base exception for all Ibutsu client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code})"
        )


# =============================================================================
# Validation Errors (client-side, pre-network)
# =============================================================================


class ValidationError(IbutsuClientError):
    """The operation was called with invalid arguments."""

    def __init__(
        self,
        message: str = "Validation error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class MissingParameterError(ValidationError):
    """A required path, query or body parameter was None or missing."""

    def __init__(
        self,
        parameter: str,
        *,
        operation: Optional[str] = None,
        message: Optional[str] = None,
    ):
        if message is None:
            message = f"Required parameter '{parameter}' was null or undefined"
            if operation:
                message += f" when calling {operation}()"
        super().__init__(message, details={"parameter": parameter})
        self.parameter = parameter
        self.operation = operation


# =============================================================================
# Response Errors (HTTP status outside [200, 300))
# =============================================================================


class ResponseError(IbutsuClientError):
    """
    The server responded with a non-success status.

    Attributes:
        status: HTTP status code (same as ``status_code``)
        reason: HTTP reason phrase
        body: Parsed JSON body, or the raw text when it is not JSON
        headers: Response headers
    """

    def __init__(
        self,
        message: str = "Response returned an error code",
        *,
        status_code: int,
        reason: str = "",
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        super().__init__(message, status_code=status_code)
        self.reason = reason
        self.body = body
        self.headers = dict(headers or {})

    @property
    def status(self) -> int:
        return self.status_code


class BadRequestError(ResponseError):
    """400: the server rejected the request payload."""


class AuthenticationError(ResponseError):
    """401: missing, invalid or expired credentials."""


class AuthorizationError(ResponseError):
    """403: the authenticated user may not perform the operation."""


class NotFoundError(ResponseError):
    """404: the requested resource does not exist."""


class ConflictError(ResponseError):
    """409: the request conflicts with the current state of the resource."""


class PayloadTooLargeError(ResponseError):
    """413: the uploaded file or body exceeds the server limit."""


class RateLimitError(ResponseError):
    """
    429: rate limit exceeded.

    ``retry_after`` holds the server's Retry-After value in seconds, when it
    sent one. The client never retries by itself.
    """

    @property
    def retry_after(self) -> Optional[int]:
        value = self.headers.get("retry-after") or self.headers.get("Retry-After")
        try:
            return int(value) if value is not None else None
        except ValueError:
            return None


class ServerError(ResponseError):
    """5xx: the server failed to process the request."""


class ServiceUnavailableError(ServerError):
    """503: the service is temporarily unavailable."""


# =============================================================================
# Transport Errors (no response received)
# =============================================================================


class TransportError(IbutsuClientError):
    """
    The request did not produce an HTTP response.

    Attributes:
        cause: The exception raised by the underlying network call
    """

    def __init__(
        self,
        message: str = "The request failed and no response was received",
        *,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.cause = cause


class RequestTimeoutError(TransportError):
    """The request timed out."""


class ConnectionFailedError(TransportError):
    """Failed to establish a connection to the server."""


class RequestCancelledError(TransportError):
    """The request was cancelled through its cancel handle."""


# =============================================================================
# Decode Errors (success status, unusable body)
# =============================================================================


class DecodeError(IbutsuClientError):
    """
    A success response carried a body that could not be decoded.

    Attributes:
        body: The raw body text
        cause: The parsing or validation error
    """

    def __init__(
        self,
        message: str = "Response body could not be decoded",
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, status_code=status_code)
        self.body = body
        self.cause = cause


# =============================================================================
# Exception Mapping
# =============================================================================

# Map HTTP status codes to exception classes
STATUS_CODE_EXCEPTIONS = {
    400: BadRequestError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    413: PayloadTooLargeError,
    429: RateLimitError,
    503: ServiceUnavailableError,
}


def _message_from_body(body: Any) -> Optional[str]:
    if isinstance(body, dict):
        for key in ("error", "detail", "message", "title"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    elif isinstance(body, str) and body:
        return body
    return None


def exception_from_response(
    status_code: int,
    *,
    reason: str = "",
    body: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> ResponseError:
    """
    Create an appropriate exception from an HTTP error response.

    Args:
        status_code: HTTP status code
        reason: HTTP reason phrase
        body: Parsed JSON body, or raw text
        headers: Response headers

    Returns:
        Appropriate ResponseError subclass
    """
    exception_class = STATUS_CODE_EXCEPTIONS.get(status_code)
    if exception_class is None:
        exception_class = ServerError if 500 <= status_code < 600 else ResponseError

    message = _message_from_body(body) or reason or f"HTTP {status_code}"
    return exception_class(
        message,
        status_code=status_code,
        reason=reason,
        body=body,
        headers=headers,
    )
