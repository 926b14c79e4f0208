from .api import TelegramVerifier

__all__ = ["TelegramVerifier"]
