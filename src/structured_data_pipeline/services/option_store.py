"""
Option Store Service.

Key-value storage for the pipeline and flow ids, standing in for the host's
settings table. Options live in memory by default, or in Redis when a Redis
URL is configured so the ids survive process restarts.
"""

import json
import logging
from typing import Any, Dict, Optional, Protocol

import redis

from structured_data_pipeline.config import settings

logger = logging.getLogger("structured_data_pipeline.services.option_store")


class OptionStore(Protocol):
    """Named scalar option values."""

    def get_option(self, name: str, default: Any = None) -> Any: ...

    def update_option(self, name: str, value: Any) -> None: ...


class InMemoryOptionStore:
    """Options kept in a dictionary for the lifetime of the process."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._options: Dict[str, Any] = dict(initial or {})

    def get_option(self, name: str, default: Any = None) -> Any:
        return self._options.get(name, default)

    def update_option(self, name: str, value: Any) -> None:
        self._options[name] = value


class RedisOptionStore:
    """
    Options persisted as Redis string keys.

    Values are JSON-encoded so integer ids read back as integers.
    """

    def __init__(self, client: redis.Redis, prefix: str = settings.OPTION_PREFIX):
        self._client = client
        self._prefix = prefix

    def _key(self, name: str) -> str:
        return f"{self._prefix}{name}"

    def get_option(self, name: str, default: Any = None) -> Any:
        raw = self._client.get(self._key(name))
        if raw is None:
            return default
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"Option '{name}' is not valid JSON, returning raw value")
            return raw

    def update_option(self, name: str, value: Any) -> None:
        self._client.set(self._key(name), json.dumps(value))
        logger.debug(f"Updated option '{name}' in Redis")


def create_option_store(redis_url: Optional[str] = None) -> OptionStore:
    """
    Create the configured option store.

    Args:
        redis_url: Redis URL, defaults to DM_STRUCTURED_DATA_REDIS_URL

    Returns:
        RedisOptionStore when a URL is set, InMemoryOptionStore otherwise
    """
    url = redis_url or settings.REDIS_URL
    if url:
        logger.info("Using Redis option store")
        return RedisOptionStore(redis.Redis.from_url(url, decode_responses=True))

    logger.info("No Redis URL configured, options are kept in memory only")
    return InMemoryOptionStore()
