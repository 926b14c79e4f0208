import logging
import random
from typing import Dict

from pydantic import ValidationError

from bots_api.config import BOT_INDEX_KEY
from bots_api.errors import NoBotsAvailable, StoreUnavailable, ServerError
from bots_api.formatters import BotIdFormatter
from bots_api.storage import BotRecord, BotStore

logger = logging.getLogger(__name__)


class RetrievalService:
    """Pick a random registered bot, pruning index entries with no usable record"""

    def __init__(self, store: BotStore):
        self.store = store

    async def _read_index(self):
        return await self.store.read_list_range(BOT_INDEX_KEY, 0, -1)

    async def get_random_bot(self) -> Dict[str, str]:
        """
        Returns:
            {'username', 'id', 'addedAt'} of a uniformly chosen bot

        Raises:
            NoBotsAvailable: index empty, or every candidate was dangling
            ServerError: store failure
        """
        try:
            bot_ids = await self._read_index()
            # Each failed attempt prunes at least one entry
            for _ in range(len(bot_ids)):
                if not bot_ids:
                    break

                bot_id = random.choice(bot_ids)
                data = await self.store.get_record(BotIdFormatter.record_key(bot_id))
                try:
                    record = BotRecord.model_validate(data)
                except ValidationError:
                    removed = await self.store.remove_from_list(BOT_INDEX_KEY, bot_id)
                    logger.warning(f"Removed dangling bot id {bot_id} from index ({removed} entries)")
                    bot_ids = await self._read_index()
                    continue

                logger.info(f"Random bot selected: @{record.username}")
                return {'username': record.username, 'id': bot_id, 'addedAt': record.added_at}
        except StoreUnavailable as e:
            raise ServerError(e.message, error='Database error') from e

        raise NoBotsAvailable()
