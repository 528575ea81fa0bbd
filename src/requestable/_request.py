from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

from httpx import AsyncClient, Client, HTTPError, StreamError
from httpx import Request as HttpxRequest

from ._utils import logger, masked_headers
from .models.errors import ReadError, TransportError

HttpClient = Union[Client, AsyncClient]


@dataclass(frozen=True)
class Request:
    """A validated, ready-to-send HTTP request.

    Instances are produced by ``RequestableBuilder.build()`` and never change
    afterwards. Each ``send()`` issues a fresh call through the borrowed
    client and returns the raw response body, whatever the status code.
    """

    url: str
    method: str
    headers: Mapping[str, str] = field(hash=False)
    body: bytes
    client: HttpClient = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def send(self) -> bytes:
        """Send the request and return the whole response body.

        Raises:
            TransportError: The exchange could not complete, including when the
                client has already been closed.
            ReadError: The response body could not be read.
        """
        if not isinstance(self.client, Client):
            raise TypeError(
                "send() requires an httpx.Client, use send_async() with an httpx.AsyncClient"
            )

        self._log_request()

        try:
            response = self.client.send(self._build_httpx_request(), stream=True)
        except (HTTPError, RuntimeError) as e:
            # RuntimeError: the client has been closed
            logger.warning(f"Request {self.method} {self.url} failed: {e!r}")
            raise TransportError(str(e), self.method, self.url) from e

        try:
            content = response.read()
        except (HTTPError, StreamError) as e:
            logger.warning(f"Reading response of {self.method} {self.url} failed: {e!r}")
            raise ReadError(str(e), self.method, self.url) from e
        finally:
            response.close()

        logger.debug(f"Response: {response.status_code} ({len(content)} bytes)")
        return content

    async def send_async(self) -> bytes:
        """Async counterpart of ``send()`` for an ``httpx.AsyncClient``."""
        if not isinstance(self.client, AsyncClient):
            raise TypeError(
                "send_async() requires an httpx.AsyncClient, use send() with an httpx.Client"
            )

        self._log_request()

        try:
            response = await self.client.send(
                self._build_httpx_request(), stream=True
            )
        except (HTTPError, RuntimeError) as e:
            logger.warning(f"Request {self.method} {self.url} failed: {e!r}")
            raise TransportError(str(e), self.method, self.url) from e

        try:
            content = await response.aread()
        except (HTTPError, StreamError) as e:
            logger.warning(f"Reading response of {self.method} {self.url} failed: {e!r}")
            raise ReadError(str(e), self.method, self.url) from e
        finally:
            await response.aclose()

        logger.debug(f"Response: {response.status_code} ({len(content)} bytes)")
        return content

    def _build_httpx_request(self) -> HttpxRequest:
        return self.client.build_request(
            self.method, self.url, headers=dict(self.headers), content=self.body
        )

    def _log_request(self) -> None:
        logger.debug(f"Request: {self.method} {self.url}")
        logger.debug(f"HEADERS: {masked_headers(self.headers)}")
