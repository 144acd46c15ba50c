"""Name selectors for the report: local table first, then an optional remote lookup."""

from eth_utils import add_0x_prefix, remove_0x_prefix

from guesser.known_selectors import KNOWN_SELECTORS
from utils.config import Config
from utils.http import fetch_json
from utils.logging import get_logger

logger = get_logger("guesser.resolver")

_SIGNATURE_DB_URL = "https://api.4byte.sourcify.dev/signature-database/v1/lookup"

# bare selector -> signature, None for a lookup that came back empty
_selector_cache: dict[str, str | None] = {}


def _first_signature(payload: dict, key: str) -> str | None:
    matches = payload.get("result", {}).get("function", {}).get(key) or []
    for match in matches:
        if isinstance(match, dict) and match.get("name"):
            return match["name"]
    return None


def lookup_signature(selector: str) -> str | None:
    """Ask the signature database for a bare 8-digit selector."""
    key = add_0x_prefix(selector)
    payload = fetch_json(_SIGNATURE_DB_URL, params={"function": key})
    if not isinstance(payload, dict):
        return None
    try:
        return _first_signature(payload, key)
    except AttributeError:
        logger.debug("Unexpected lookup payload for %s", key)
        return None


def resolve_selector(selector: str, remote: bool | None = None) -> str | None:
    """Resolve a selector to its text signature, e.g. "refundETH()".

    ``remote`` allows the database lookup; None defers to
    ``Config.get_remote_lookup()``. Remote answers, including misses, are
    cached for the life of the process.
    """
    selector = remove_0x_prefix(selector.lower())
    signature = KNOWN_SELECTORS.get(selector)
    if signature is not None or selector in _selector_cache:
        return signature or _selector_cache[selector]

    if remote is None:
        remote = Config.get_remote_lookup()
    if not remote:
        return None

    _selector_cache[selector] = lookup_signature(selector)
    return _selector_cache[selector]
