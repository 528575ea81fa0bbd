import logging
import sys
from typing import Mapping, Optional

from .constants import HEADER_AUTHORIZATION, LOGGER_NAME, MASKED_VALUE

logger: logging.Logger = logging.getLogger(LOGGER_NAME)


def setup_logging(should_debug: Optional[bool] = None) -> None:
    logging.basicConfig(
        format="[%(asctime)s - %(name)s:%(lineno)d - %(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)
    logger.addHandler(logging.StreamHandler(sys.stderr))


def masked_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy of ``headers`` safe to log: credentials are replaced with ``***``."""
    return {
        key: MASKED_VALUE if key.lower() == HEADER_AUTHORIZATION.lower() else value
        for key, value in headers.items()
    }
