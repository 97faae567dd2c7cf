"""Download the reference pages."""

import logging

import requests

logger = logging.getLogger(__name__)


def fetch_page(url: str, timeout: float = 30) -> str:
    """GET `url` and return its body, raising on HTTP errors."""
    logger.info("Fetching %s", url)
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    logger.debug("Fetched %d characters from %s", len(response.text), url)
    return response.text
