from .auth import AuthStrategy, BasicAuth, BearerAuth, NoAuth
from .errors import (
    BaseUrlMissingError,
    ReadError,
    RequestableError,
    TransportError,
    ValidationError,
)
from .methods import HttpMethod

__all__ = [
    "AuthStrategy",
    "BasicAuth",
    "BearerAuth",
    "NoAuth",
    "BaseUrlMissingError",
    "ReadError",
    "RequestableError",
    "TransportError",
    "ValidationError",
    "HttpMethod",
]
