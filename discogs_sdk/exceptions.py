"""Exceptions raised by the Discogs client."""

from typing import List, Optional


class DiscogsError(Exception):
    """Base exception for Discogs client errors."""

    pass


class RequestError(DiscogsError):
    """Raised when a request fails because of the caller (4xx) or the transport.

    Transport and file I/O failures carry no status code; the original
    exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body
        self.url = url


class ThrottledError(RequestError):
    """Raised when the API responds with HTTP 429."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = 429,
        response_body: Optional[str] = None,
        url: Optional[str] = None,
        rate_limit: Optional[int] = None,
        rate_limit_remaining: Optional[int] = None,
    ):
        super().__init__(message, status_code, response_body, url)
        self.rate_limit = rate_limit
        self.rate_limit_remaining = rate_limit_remaining


class ResponseError(DiscogsError):
    """Raised when the service fails (5xx) or returns an unexpected status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body
        self.url = url


class ParseError(DiscogsError):
    """Raised when a response body cannot be deserialized."""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message)
        self.body = body


class AuthError(DiscogsError):
    """Raised when an operation needs credentials the client does not have."""

    pass


class ValidationError(DiscogsError, ValueError):
    """Raised when inventory CSV data fails validation."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors) if errors else [message]
