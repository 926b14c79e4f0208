import asyncio
import logging
from typing import Dict, List

import redis

from bots_api.errors import StoreUnavailable
from .base import BotStore

logger = logging.getLogger(__name__)


class RedisStore(BotStore):
    """
    Store backed by a Redis-protocol server (Vercel KV, Upstash, plain Redis)

    The blocking redis-py client runs in a worker thread so each operation
    can be awaited from the request's event loop.
    """

    name = 'redis'

    def __init__(self, client: redis.Redis):
        self.client = client

    @classmethod
    def from_url(cls, url: str, token: str = None) -> 'RedisStore':
        """Connect and PING; raises if the server is unreachable"""
        kwargs = {'decode_responses': True}
        if token:
            kwargs['password'] = token
        client = redis.from_url(url, **kwargs)
        client.ping()
        return cls(client)

    async def _call(self, method: str, *args, **kwargs):
        try:
            return await asyncio.to_thread(getattr(self.client, method), *args, **kwargs)
        except redis.exceptions.RedisError as e:
            logger.error(f"Redis {method} failed: {e}")
            raise StoreUnavailable(str(e)) from e

    async def set_record(self, key: str, record: Dict[str, str]) -> None:
        await self._call('hset', key, mapping=record)

    async def get_record(self, key: str) -> Dict[str, str]:
        return await self._call('hgetall', key) or {}

    async def push_to_list(self, list_key: str, value: str) -> int:
        return await self._call('lpush', list_key, value)

    async def read_list_range(self, list_key: str, start: int, end: int) -> List[str]:
        return await self._call('lrange', list_key, start, end) or []

    async def remove_from_list(self, list_key: str, value: str) -> int:
        return await self._call('lrem', list_key, 0, value)
