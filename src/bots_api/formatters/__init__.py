"""Formatters for identifiers and timestamps"""
from .timestamp_formatter import TimestampFormatter
from .bot_id_formatter import BotIdFormatter

__all__ = ["TimestampFormatter", "BotIdFormatter"]
