from abc import ABC, abstractmethod
from typing import Dict, List


class BotStore(ABC):
    """
    Key-value store contract used by the services

    Hashes hold bot records, a list holds the bot index. Every operation may
    raise StoreUnavailable when the backing store cannot be reached.
    """

    name = 'store'

    @abstractmethod
    async def set_record(self, key: str, record: Dict[str, str]) -> None:
        """Set the fields of the hash at key"""

    @abstractmethod
    async def get_record(self, key: str) -> Dict[str, str]:
        """All fields of the hash at key, {} if missing"""

    @abstractmethod
    async def push_to_list(self, list_key: str, value: str) -> int:
        """Prepend value to the list, returns the new length"""

    @abstractmethod
    async def read_list_range(self, list_key: str, start: int, end: int) -> List[str]:
        """Elements start..end inclusive, negative offsets count from the tail"""

    @abstractmethod
    async def remove_from_list(self, list_key: str, value: str) -> int:
        """Remove all occurrences of value, returns how many were removed"""
