import logging
import threading
from typing import Dict, List

from .base import BotStore

logger = logging.getLogger(__name__)


class MemoryStore(BotStore):
    """In-process fallback with the same semantics as the Redis store"""

    name = 'memory'

    def __init__(self):
        self._hashes: Dict[str, Dict[str, str]] = {}
        self._lists: Dict[str, List[str]] = {}
        self._lock = threading.Lock()

    async def set_record(self, key: str, record: Dict[str, str]) -> None:
        with self._lock:
            self._hashes.setdefault(key, {}).update(record)

    async def get_record(self, key: str) -> Dict[str, str]:
        with self._lock:
            return dict(self._hashes.get(key, {}))

    async def push_to_list(self, list_key: str, value: str) -> int:
        with self._lock:
            items = self._lists.setdefault(list_key, [])
            items.insert(0, value)
            return len(items)

    async def read_list_range(self, list_key: str, start: int, end: int) -> List[str]:
        with self._lock:
            items = self._lists.get(list_key, [])
            length = len(items)
            if start < 0:
                start = max(length + start, 0)
            if end < 0:
                end = length + end
            # LRANGE end is inclusive
            return items[start:end + 1] if start <= end else []

    async def remove_from_list(self, list_key: str, value: str) -> int:
        with self._lock:
            items = self._lists.get(list_key, [])
            kept = [item for item in items if item != value]
            removed = len(items) - len(kept)
            if kept:
                self._lists[list_key] = kept
            else:
                # Redis drops empty lists
                self._lists.pop(list_key, None)
            return removed
