"""Fluent builder for validated HTTP requests with pluggable authentication.

Example::

    import httpx

    from requestable import BasicAuth, RequestableBuilder

    with httpx.Client(timeout=2.0) as client:
        body = (
            RequestableBuilder("https://example.com", client)
            .auth(BasicAuth("bob", "haspassword"))
            .build()
            .send()
        )
"""

from ._builder import RequestableBuilder
from ._config import Config
from ._request import HttpClient, Request
from ._utils import setup_logging
from .models import (
    AuthStrategy,
    BaseUrlMissingError,
    BasicAuth,
    BearerAuth,
    HttpMethod,
    NoAuth,
    ReadError,
    RequestableError,
    TransportError,
    ValidationError,
)

__all__ = [
    "RequestableBuilder",
    "Request",
    "HttpClient",
    "Config",
    "setup_logging",
    "AuthStrategy",
    "NoAuth",
    "BasicAuth",
    "BearerAuth",
    "HttpMethod",
    "RequestableError",
    "ValidationError",
    "BaseUrlMissingError",
    "TransportError",
    "ReadError",
]
