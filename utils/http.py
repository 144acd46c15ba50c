"""HTTP helper for the optional selector lookup API."""

from typing import Any

import requests

from utils.config import Config
from utils.logging import get_logger

logger = get_logger("utils.http")

_HEADERS = {"Accept": "application/json"}


def fetch_json(url: str, timeout: int | None = None, **kwargs: Any) -> dict | None:
    """GET a URL and return its JSON body.

    Returns None on transport errors, non-200 responses or undecodable bodies.
    """
    if timeout is None:
        timeout = Config.get_request_timeout()
    try:
        resp = requests.get(url, headers=_HEADERS, timeout=timeout, **kwargs)
    except requests.RequestException as e:
        logger.warning("Request failed for %s: %s", url, e)
        return None
    if resp.status_code != 200:
        logger.warning("HTTP %s for %s: %s", resp.status_code, url, resp.text[:200])
        return None
    try:
        return resp.json()
    except ValueError:
        logger.warning("Invalid JSON from %s", url)
        return None
