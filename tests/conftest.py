import sys
from pathlib import Path
from typing import AsyncGenerator, Generator

import httpx
import pytest

# Ensure local source package (src/requestable) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


def echo_handler(request: httpx.Request) -> httpx.Response:
    """Reply with the method, headers and body of the received request."""
    headers: dict[str, list[str]] = {}
    for key, value in request.headers.raw:
        headers.setdefault(key.decode("latin-1"), []).append(value.decode("latin-1"))

    return httpx.Response(
        200,
        json={
            "headers": headers,
            "method": request.method,
            "data": request.content.decode("utf-8"),
        },
    )


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("REQUESTABLE_URL", raising=False)
    monkeypatch.delenv("REQUESTABLE_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("REQUESTABLE_USERNAME", raising=False)
    monkeypatch.delenv("REQUESTABLE_PASSWORD", raising=False)


@pytest.fixture
def base_url() -> str:
    return "http://localhost:8080"


@pytest.fixture
def echo_url() -> str:
    return "http://testserver/echo"


@pytest.fixture
def client() -> Generator[httpx.Client, None, None]:
    with httpx.Client(timeout=2.0) as client:
        yield client


@pytest.fixture
async def async_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(timeout=2.0) as client:
        yield client


@pytest.fixture
def echo_client() -> Generator[httpx.Client, None, None]:
    with httpx.Client(transport=httpx.MockTransport(echo_handler)) as client:
        yield client


@pytest.fixture
async def async_echo_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(echo_handler)
    ) as client:
        yield client
