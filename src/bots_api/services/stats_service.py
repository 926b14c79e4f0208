import logging
from typing import Any, Dict

from bots_api.config import BOT_INDEX_KEY
from bots_api.storage import BotStore

logger = logging.getLogger(__name__)


class StatsService:
    """Report how many bots are indexed"""

    def __init__(self, store: BotStore):
        self.store = store

    async def get_stats(self) -> Dict[str, Any]:
        """Never raises; store failures give a zero count with status 'error'"""
        try:
            bot_ids = await self.store.read_list_range(BOT_INDEX_KEY, 0, -1)
            return {'totalBots': len(bot_ids), 'status': 'operational'}
        except Exception as e:
            logger.error(f"Error reading stats: {e}")
            return {'totalBots': 0, 'status': 'error', 'error': str(e)}
