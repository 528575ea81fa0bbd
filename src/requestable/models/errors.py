from typing import Optional


class RequestableError(Exception):
    """Base class for every error raised by requestable."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(RequestableError):
    """Raised by ``RequestableBuilder.build()`` when the staged configuration is unusable.

    Always recoverable: fix the builder inputs and call ``build()`` again.
    """


class BaseUrlMissingError(ValidationError):
    def __init__(
        self,
        message="Base URL required. Pass base_url explicitly or set the REQUESTABLE_URL environment variable.",
    ):
        super().__init__(message)


class _ExchangeError(RequestableError):
    def __init__(
        self, message: str, method: Optional[str] = None, url: Optional[str] = None
    ):
        self.method = method
        self.url = url
        if method and url:
            message = f"{message}\nRequest: {method} {url}"
        super().__init__(message)


class TransportError(_ExchangeError):
    """Raised by ``Request.send()`` when the HTTP exchange could not complete.

    Connection refused, DNS failures, timeouts enforced by the client and TLS
    failures all end up here. The underlying httpx error is the ``__cause__``.
    """


class ReadError(_ExchangeError):
    """Raised by ``Request.send()`` when the response body could not be fully read.

    The underlying httpx error is the ``__cause__``.
    """
