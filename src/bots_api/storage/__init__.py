"""Key-value storage: Redis-backed store with in-memory fallback"""
import logging
from typing import Optional

from .base import BotStore
from .memory_store import MemoryStore
from .models import BotRecord
from .redis_store import RedisStore

logger = logging.getLogger(__name__)


def create_store(url: Optional[str] = None, token: Optional[str] = None) -> BotStore:
    """
    Pick the store once at startup

    Falls back to MemoryStore when no URL is configured or the server does
    not answer PING. There is no reconnect later on.
    """
    if not url:
        store = MemoryStore()
        logger.info(f"KV_URL not set, using {store.name} store")
        return store

    try:
        store = RedisStore.from_url(url, token)
        logger.info(f"KV store connected ({store.name})")
        return store
    except Exception as e:
        store = MemoryStore()
        logger.warning(f"KV connection failed: {e}, using {store.name} store")
        return store


__all__ = ["BotStore", "BotRecord", "MemoryStore", "RedisStore", "create_store"]
