# Telegram Bot API token verification

import json
import logging
import os

from telegram import Bot
from telegram.error import BadRequest, NetworkError, TelegramError
from telegram.request import HTTPXRequest

from bots_api.errors import InvalidToken, ServerError

_LOGGER = logging.getLogger(__name__)


class GetMeRequest(HTTPXRequest):
    """
    HTTPXRequest that keeps the last Bot API answer

    python-telegram-bot rewrites some error messages (flood control, 5xx), so
    the raw body is kept to report Telegram's own description.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.last_response = None

    async def do_request(self, *args, **kwargs):
        code, payload = await super().do_request(*args, **kwargs)
        self.last_response = (code, payload)
        return code, payload

    def error_description(self):
        """Description of an ``ok: false`` answer, None if there was none"""
        if self.last_response is None:
            return None
        try:
            data = json.loads(self.last_response[1].decode('utf-8'))
        except ValueError:
            return None
        if not isinstance(data, dict) or data.get('ok', True):
            return None
        return data.get('description', '')


class TelegramVerifier:
    """
    Validate bot tokens with the Bot API ``getMe`` method

    A token is accepted when Telegram answers getMe for it; the username of
    the bot is returned so it can be stored alongside the token.
    """

    def __init__(self, base_url=None, timeout=10.0):
        """
        Initialize verifier

        Args:
            base_url: Custom Bot API base URL (for E2E testing with mock server)
            timeout: Connect/read timeout for the getMe call, in seconds
        """
        self.base_url = base_url or os.getenv('TELEGRAM_API_BASE_URL')
        self.timeout = timeout

        if self.base_url:
            _LOGGER.info(f"Using custom Telegram API URL: {self.base_url}")

    def _make_bot(self, token: str, request: HTTPXRequest) -> Bot:
        if self.base_url:
            return Bot(token=token, base_url=self.base_url, request=request, get_updates_request=request)
        # Production: official Telegram API (https://api.telegram.org)
        return Bot(token=token, request=request, get_updates_request=request)

    async def get_username(self, token: str) -> str:
        """
        Call getMe with the token and return the bot username

        Any ``ok: false`` answer from Telegram rejects the token. Only a
        missing or unreadable answer (timeout, connection error) counts as
        a server error.

        Raises:
            InvalidToken: Telegram reported failure for the token
            ServerError: no usable answer from Telegram
        """
        request = GetMeRequest(connect_timeout=self.timeout, read_timeout=self.timeout)
        try:
            bot = self._make_bot(token, request)
            await request.initialize()
            me = await bot.get_me()
        except TelegramError as e:
            description = request.error_description()
            if description is not None:
                _LOGGER.info(f"Token rejected by Telegram: {description}")
                raise InvalidToken(description) from e

            # Unreadable answer, or transport failure (TimedOut, connection errors)
            transport_failure = isinstance(e, NetworkError) and not isinstance(e, BadRequest)
            if request.last_response is not None or transport_failure:
                _LOGGER.error(f"getMe request failed: {e.message}")
                raise ServerError(e.message) from e

            _LOGGER.info(f"Token rejected by Telegram: {e.message}")
            raise InvalidToken(e.message) from e
        finally:
            await request.shutdown()

        return me.username
