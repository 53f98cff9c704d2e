"""
Livy client error types.

Every failed call raises exactly one of these; nothing is retried.
"""

from typing import Any, Optional


class LivyError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class TransportError(LivyError):
    """Network, TLS or connect failure. `cause` is the underlying httpx error."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__("transport_error", message)
        self.cause = cause


class HttpStatusError(LivyError):
    """Any response status other than 200."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__("http_error", f"invalid status code: {status_code}", {"body": body[:200]})
        self.status_code = status_code


class DecodeError(LivyError):
    """A 200 response whose body is not the expected JSON shape."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("decode_error", message, details)
