import random
import string
from datetime import datetime
from typing import Optional

from bots_api.config import BOT_RECORD_PREFIX
from .timestamp_formatter import TimestampFormatter

BASE36_ALPHABET = string.digits + string.ascii_lowercase
SUFFIX_LENGTH = 9


class BotIdFormatter:
    """Build bot identifiers of the form bot_<epoch-ms>_<base36 suffix>"""

    @staticmethod
    def random_suffix(length: int = SUFFIX_LENGTH) -> str:
        return ''.join(random.choice(BASE36_ALPHABET) for _ in range(length))

    @staticmethod
    def format_bot_id(timestamp: Optional[datetime] = None, suffix: Optional[str] = None) -> str:
        """
        Uniqueness is probabilistic only, callers do not check for collisions
        """
        millis = TimestampFormatter.epoch_millis(timestamp)
        return f"bot_{millis}_{suffix or BotIdFormatter.random_suffix()}"

    @staticmethod
    def record_key(bot_id: str, prefix: str = BOT_RECORD_PREFIX) -> str:
        """Store key of the record hash for a bot id"""
        return f"{prefix}{bot_id}"
