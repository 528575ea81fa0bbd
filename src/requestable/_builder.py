from typing import Optional, Union

from ._config import Config
from ._request import HttpClient, Request
from ._utils import is_valid_base_url, logger
from ._utils.constants import HEADER_CONTENT_TYPE
from .models.auth import AuthStrategy, NoAuth
from .models.errors import ValidationError
from .models.methods import HttpMethod


_FORBIDDEN_HEADER_CHARS = ("\r", "\n", "\x00")


def _header_error(key: str, value: str) -> Optional[str]:
    # httpx encodes header names and values as ASCII
    for part in (key, value):
        if not part.isascii() or any(c in part for c in _FORBIDDEN_HEADER_CHARS):
            return f"invalid header: {key!r}"
    return None


def _set_header(headers: dict[str, str], key: str, value: str) -> None:
    # header names are case-insensitive on the wire
    for existing in [k for k in headers if k.lower() == key.lower()]:
        del headers[existing]
    headers[key] = value


class RequestableBuilder:
    """Fluent, single-use builder for a ``Request``.

    Setters never raise. Empty header keys or values, an empty content type and
    a ``None`` body are ignored. Everything else is checked by ``build()``.

    Example::

        request = (
            RequestableBuilder("https://example.com/items", httpx.Client())
            .method(HttpMethod.POST)
            .auth(BearerAuth("mytoken"))
            .content_type("application/json")
            .message(b'{"key": "value"}')
            .build()
        )

    The client is borrowed: neither the builder nor the requests it produces
    ever close it.
    """

    def __init__(self, base_url: str, client: Optional[HttpClient]) -> None:
        self._base_url = base_url
        self._client = client
        self._method: HttpMethod = HttpMethod.GET
        self._method_error: Optional[str] = None
        self._headers: dict[str, str] = {}
        self._content_type: Optional[str] = None
        self._auth: AuthStrategy = NoAuth()
        self._body: Optional[bytes] = None
        self._body_error: Optional[str] = None

    @classmethod
    def from_config(
        cls, config: Config, client: Optional[HttpClient]
    ) -> "RequestableBuilder":
        return cls(config.base_url, client).auth(config.auth_strategy())

    def method(self, method: Union[HttpMethod, str]) -> "RequestableBuilder":
        """Set the HTTP method. Names are case-insensitive.

        An unknown method is reported by ``build()``; a later valid call clears it.
        """
        value = method.value if isinstance(method, HttpMethod) else method
        try:
            if not isinstance(value, str):
                raise ValueError(value)
            self._method = HttpMethod(value.upper())
            self._method_error = None
        except ValueError:
            self._method_error = f"invalid method: {method!r}"
        return self

    def auth(self, strategy: AuthStrategy) -> "RequestableBuilder":
        self._auth = strategy
        return self

    def content_type(self, content_type: str) -> "RequestableBuilder":
        if content_type:
            self._content_type = content_type
        return self

    def header(self, key: str, value: str) -> "RequestableBuilder":
        if key and value:
            _set_header(self._headers, key, value)
        return self

    def message(
        self, body: Optional[Union[bytes, bytearray, memoryview, str]]
    ) -> "RequestableBuilder":
        """Set the request body. ``str`` is UTF-8 encoded, ``None`` is ignored.

        Any other type is reported by ``build()``; a later valid call clears it.
        """
        if body is None:
            return self
        if isinstance(body, str):
            self._body = body.encode("utf-8")
        elif isinstance(body, (bytes, bytearray, memoryview)):
            self._body = bytes(body)
        else:
            self._body_error = f"invalid message type: {type(body).__name__}"
            return self
        self._body_error = None
        return self

    def build(self) -> Request:
        """Validate the staged configuration and freeze it into a ``Request``.

        Headers are merged so that the auth header is overridden by the content
        type, and both are overridden by headers set through ``header()``.

        Raises:
            ValidationError: The base URL or client is missing or invalid, an
                unknown method or body type was set, or a header cannot be
                encoded.
        """
        if not is_valid_base_url(self._base_url):
            raise ValidationError("missing or invalid base URL")
        if self._client is None:
            raise ValidationError("missing HTTP client")
        if self._method_error is not None:
            raise ValidationError(self._method_error)
        if self._body_error is not None:
            raise ValidationError(self._body_error)

        headers: dict[str, str] = {}
        auth_header = self._auth.contribute_header()
        if auth_header is not None:
            _set_header(headers, *auth_header)
        if self._content_type:
            _set_header(headers, HEADER_CONTENT_TYPE, self._content_type)
        for key, value in self._headers.items():
            _set_header(headers, key, value)

        for key, value in headers.items():
            error = _header_error(key, value)
            if error is not None:
                raise ValidationError(error)

        logger.debug(f"Built request: {self._method.value} {self._base_url}")

        return Request(
            url=self._base_url,
            method=self._method.value,
            headers=headers,
            body=self._body if self._body is not None else b"",
            client=self._client,
        )
