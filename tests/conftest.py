import os
import pytest
from unittest.mock import AsyncMock, Mock

# Set environment variables BEFORE any imports
os.environ.pop('KV_URL', None)
os.environ.pop('REDIS_URL', None)
os.environ.pop('KV_REST_API_TOKEN', None)
os.environ.pop('TELEGRAM_API_BASE_URL', None)
os.environ['PORT'] = '3000'

from bots_api.storage import MemoryStore


@pytest.fixture
def store():
    """Fresh in-memory store"""
    return MemoryStore()


@pytest.fixture
def verifier():
    """Telegram verifier that accepts every token as @alice_bot"""
    mock_verifier = Mock()
    mock_verifier.get_username = AsyncMock(return_value='alice_bot')
    return mock_verifier


@pytest.fixture
def app(store, verifier):
    """Flask app wired to the in-memory store and mocked verifier"""
    from bots_api.core.server import create_app

    flask_app = create_app(store=store, verifier=verifier)
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def client(app):
    """Create Flask test client"""
    with app.test_client() as client:
        yield client
