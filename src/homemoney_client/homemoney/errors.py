from __future__ import annotations


class HomemoneyError(Exception):
    """Base exception for Homemoney client errors."""


class HomemoneyNetworkError(HomemoneyError):
    """The request never produced an HTTP response (DNS, refused, timeout, TLS)."""


class HomemoneyHTTPError(HomemoneyError):
    """The service answered with a non-2xx status."""

    def __init__(self, status_code: int, reason_phrase: str, response_body: str | None = None):
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.response_body = response_body
        super().__init__(f"Request failed with code {status_code}: {reason_phrase}")


class HomemoneyDecodeError(HomemoneyError):
    """A 2xx response whose body is empty, not JSON, or has the wrong shape."""


class AuthenticationRequiredError(HomemoneyError):
    """An authenticated operation was called before a successful login()."""


class HomemoneyAuthError(HomemoneyError):
    """The service rejected the credentials (nonzero error code in the envelope)."""

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"Authentication failed: code={code} {message}")
