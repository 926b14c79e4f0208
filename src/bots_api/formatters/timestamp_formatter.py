from datetime import datetime
from typing import Optional

import pytz


class TimestampFormatter:
    """Format registration timestamps"""

    @staticmethod
    def now() -> datetime:
        return datetime.now(pytz.utc)

    @staticmethod
    def format_iso(timestamp: datetime) -> str:
        """
        Format a timestamp as ISO-8601 UTC with millisecond precision

        Args:
            timestamp: aware or naive datetime (naive is taken as UTC)

        Returns:
            String like "2025-10-25T12:00:00.123Z"
        """
        if timestamp.tzinfo is None:
            timestamp = pytz.utc.localize(timestamp)
        utc = timestamp.astimezone(pytz.utc)
        return utc.strftime('%Y-%m-%dT%H:%M:%S.') + f"{utc.microsecond // 1000:03d}Z"

    @staticmethod
    def epoch_millis(timestamp: Optional[datetime] = None) -> int:
        """Milliseconds since the Unix epoch"""
        timestamp = timestamp or TimestampFormatter.now()
        return int(timestamp.timestamp() * 1000)
