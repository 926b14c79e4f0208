import logging
from typing import Dict, Optional

from bots_api.api.telegram import TelegramVerifier
from bots_api.config import BOT_INDEX_KEY
from bots_api.errors import MissingToken, StoreUnavailable, ServerError
from bots_api.formatters import BotIdFormatter, TimestampFormatter
from bots_api.storage import BotRecord, BotStore

logger = logging.getLogger(__name__)


class RegistrationService:
    """Verify a bot token with Telegram and add the bot to the index"""

    def __init__(self, store: BotStore, verifier: TelegramVerifier):
        self.store = store
        self.verifier = verifier

    async def register(self, token: Optional[str]) -> Dict[str, str]:
        """
        Register a bot by token

        Writes the record first, then prepends its id to the index. If the
        index push fails the record stays orphaned; retrieval only trusts the
        index so that is harmless.

        Returns:
            {'id': <bot id>, 'username': <bot username>}

        Raises:
            MissingToken: token absent or empty
            InvalidToken: Telegram rejected the token
            ServerError: upstream or store failure
        """
        if not token:
            raise MissingToken()

        username = await self.verifier.get_username(token)

        now = TimestampFormatter.now()
        bot_id = BotIdFormatter.format_bot_id(now)
        record = BotRecord(token=token, username=username, added_at=TimestampFormatter.format_iso(now))

        try:
            await self.store.set_record(BotIdFormatter.record_key(bot_id), record.to_mapping())
            await self.store.push_to_list(BOT_INDEX_KEY, bot_id)
        except StoreUnavailable as e:
            raise ServerError(e.message) from e

        logger.info(f"Bot added: @{username} (ID: {bot_id})")
        return {'id': bot_id, 'username': username}
