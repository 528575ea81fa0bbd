from ._logs import logger, masked_headers, setup_logging
from ._url import is_valid_base_url

__all__ = [
    "logger",
    "masked_headers",
    "setup_logging",
    "is_valid_base_url",
]
