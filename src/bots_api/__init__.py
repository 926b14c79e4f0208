"""Telegram Bots API: register bot tokens and hand out a random bot"""

__version__ = "1.0.0"
