from enum import Enum


class HttpMethod(str, Enum):
    """HTTP methods accepted by ``RequestableBuilder.method()``."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
