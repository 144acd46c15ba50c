"""
Configuration module for decoder settings and environment variable handling.

The heuristics themselves take plain values; this module is the one place
that reads them from the environment (or a .env file).
"""

import os
from typing import Optional

from dotenv import load_dotenv

from utils.logging import get_logger

# Load environment variables from .env file
load_dotenv()

logger = get_logger("utils.config")


class Config:
    """Global configuration handler."""

    # Default values that can be overridden by environment variables
    DEFAULT_TIMEOUT = 30  # seconds
    DEFAULT_MAX_NESTING_DEPTH = 8
    DEFAULT_RESOLVE_DYNAMIC_REGIONS = False
    DEFAULT_REMOTE_LOOKUP = False

    @staticmethod
    def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
        """Get environment variable with fallback to default."""
        return os.getenv(key, default)

    @staticmethod
    def get_env_int(key: str, default: int) -> int:
        """Get environment variable as integer with fallback to default."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid integer value for %s: %s. Using default %s", key, value, default)
            return default

    @staticmethod
    def get_env_bool(key: str, default: bool) -> bool:
        """Get environment variable as boolean with fallback to default."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("true", "yes", "1")

    @classmethod
    def get_max_nesting_depth(cls) -> int:
        """Get how many levels of nested calls are walked below the outer call."""
        depth = cls.get_env_int("GUESSER_MAX_NESTING_DEPTH", cls.DEFAULT_MAX_NESTING_DEPTH)
        if depth < 0:
            logger.warning("Negative nesting depth %s. Using default %s", depth, cls.DEFAULT_MAX_NESTING_DEPTH)
            return cls.DEFAULT_MAX_NESTING_DEPTH
        return depth

    @classmethod
    def get_resolve_dynamic_regions(cls) -> bool:
        """Whether the dynamic-region resolution stage runs after the walk."""
        return cls.get_env_bool("GUESSER_RESOLVE_DYNAMIC_REGIONS", cls.DEFAULT_RESOLVE_DYNAMIC_REGIONS)

    @classmethod
    def get_remote_lookup(cls) -> bool:
        """Whether unknown selectors may be looked up over the network."""
        return cls.get_env_bool("GUESSER_REMOTE_LOOKUP", cls.DEFAULT_REMOTE_LOOKUP)

    @classmethod
    def get_request_timeout(cls) -> int:
        """Get HTTP request timeout in seconds."""
        return cls.get_env_int("REQUEST_TIMEOUT", cls.DEFAULT_TIMEOUT)
