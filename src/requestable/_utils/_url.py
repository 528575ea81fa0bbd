from httpx import URL, InvalidURL

_SUPPORTED_SCHEMES = ("http", "https")
_MAX_PORT = 65535


def is_valid_base_url(url: str) -> bool:
    """Check that ``url`` is an absolute http(s) URL with a host.

    Parsing is done by httpx, so any URL accepted here is also accepted when
    the request is sent.

    >>> is_valid_base_url("http://localhost:8080")
    True
    >>> is_valid_base_url("localhost:8080")
    False
    >>> is_valid_base_url("")
    False
    """
    if not url or not isinstance(url, str):
        return False

    try:
        parsed = URL(url)
    except InvalidURL:
        return False

    # httpx does not range-check ports
    if parsed.port is not None and not 0 < parsed.port <= _MAX_PORT:
        return False

    return parsed.scheme in _SUPPORTED_SCHEMES and bool(parsed.host)
