"""
Tests for the Redis-backed store and store selection
"""
import logging
import pytest
import redis
from unittest.mock import Mock, patch

from bots_api.errors import StoreUnavailable
from bots_api.storage import MemoryStore, RedisStore, create_store


@pytest.fixture
def redis_client():
    """Mocked redis.Redis client"""
    return Mock(spec=redis.Redis)


@pytest.fixture
def redis_store(redis_client):
    return RedisStore(redis_client)


class TestRedisStoreOperations:
    """Store operations map to Redis commands"""

    @pytest.mark.asyncio
    async def test_set_record_uses_hset_mapping(self, redis_store, redis_client):
        await redis_store.set_record('bot:1', {'username': 'alice_bot'})

        redis_client.hset.assert_called_once_with('bot:1', mapping={'username': 'alice_bot'})

    @pytest.mark.asyncio
    async def test_get_record(self, redis_store, redis_client):
        redis_client.hgetall.return_value = {'username': 'alice_bot'}

        assert await redis_store.get_record('bot:1') == {'username': 'alice_bot'}
        redis_client.hgetall.assert_called_once_with('bot:1')

    @pytest.mark.asyncio
    async def test_get_record_none_becomes_empty(self, redis_store, redis_client):
        """Test client returning None reads as missing record"""
        redis_client.hgetall.return_value = None

        assert await redis_store.get_record('bot:1') == {}

    @pytest.mark.asyncio
    async def test_push_to_list_uses_lpush(self, redis_store, redis_client):
        redis_client.lpush.return_value = 3

        assert await redis_store.push_to_list('all_bots', 'bot_1') == 3
        redis_client.lpush.assert_called_once_with('all_bots', 'bot_1')

    @pytest.mark.asyncio
    async def test_read_list_range_uses_lrange(self, redis_store, redis_client):
        redis_client.lrange.return_value = ['bot_2', 'bot_1']

        assert await redis_store.read_list_range('all_bots', 0, -1) == ['bot_2', 'bot_1']
        redis_client.lrange.assert_called_once_with('all_bots', 0, -1)

    @pytest.mark.asyncio
    async def test_remove_from_list_removes_all(self, redis_store, redis_client):
        """Test LREM count 0 (all occurrences)"""
        redis_client.lrem.return_value = 2

        assert await redis_store.remove_from_list('all_bots', 'bot_1') == 2
        redis_client.lrem.assert_called_once_with('all_bots', 0, 'bot_1')


class TestRedisStoreFailures:
    """Redis errors surface as StoreUnavailable"""

    @pytest.mark.asyncio
    async def test_connection_error(self, redis_store, redis_client):
        redis_client.lrange.side_effect = redis.exceptions.ConnectionError("Connection refused")

        with pytest.raises(StoreUnavailable) as exc_info:
            await redis_store.read_list_range('all_bots', 0, -1)

        assert 'Connection refused' in exc_info.value.message

    @pytest.mark.asyncio
    async def test_timeout_error(self, redis_store, redis_client):
        redis_client.hset.side_effect = redis.exceptions.TimeoutError("Timeout reading from socket")

        with pytest.raises(StoreUnavailable):
            await redis_store.set_record('bot:1', {'username': 'alice_bot'})


class TestCreateStore:
    """One-time store selection at startup"""

    def test_no_url_uses_memory(self):
        """Test missing URL selects in-memory store"""
        assert isinstance(create_store(None), MemoryStore)
        assert isinstance(create_store(''), MemoryStore)

    def test_reachable_redis(self):
        """Test successful PING selects Redis store"""
        with patch('bots_api.storage.redis_store.redis.from_url') as mock_from_url:
            mock_client = Mock()
            mock_from_url.return_value = mock_client

            store = create_store('redis://localhost:6379/0', 'secret')

            assert isinstance(store, RedisStore)
            assert store.client is mock_client
            mock_client.ping.assert_called_once()
            mock_from_url.assert_called_once_with(
                'redis://localhost:6379/0', decode_responses=True, password='secret'
            )

    def test_no_token_omits_password(self):
        with patch('bots_api.storage.redis_store.redis.from_url') as mock_from_url:
            create_store('redis://localhost:6379/0')

            mock_from_url.assert_called_once_with('redis://localhost:6379/0', decode_responses=True)

    def test_unreachable_redis_falls_back(self):
        """Test failed PING selects in-memory store"""
        with patch('bots_api.storage.redis_store.redis.from_url') as mock_from_url:
            mock_from_url.return_value.ping.side_effect = redis.exceptions.ConnectionError("refused")

            assert isinstance(create_store('redis://localhost:6379/0'), MemoryStore)

    def test_invalid_url_falls_back(self):
        """Test client construction failure selects in-memory store"""
        with patch('bots_api.storage.redis_store.redis.from_url', side_effect=ValueError("bad url")):
            assert isinstance(create_store('not-a-url'), MemoryStore)

    def test_fallback_logs_selected_store(self, caplog):
        """Test fallback warning names the store actually in use"""
        with patch('bots_api.storage.redis_store.redis.from_url') as mock_from_url, \
             caplog.at_level(logging.INFO, logger='bots_api.storage'):
            mock_from_url.return_value.ping.side_effect = redis.exceptions.ConnectionError("refused")

            store = create_store('redis://localhost:6379/0')

        assert store.name == 'memory'
        assert 'using memory store' in caplog.text

    def test_connected_logs_selected_store(self, caplog):
        with patch('bots_api.storage.redis_store.redis.from_url'), \
             caplog.at_level(logging.INFO, logger='bots_api.storage'):
            store = create_store('redis://localhost:6379/0')

        assert store.name == 'redis'
        assert 'KV store connected (redis)' in caplog.text
