import asyncio
import logging
from typing import Optional

from flask import Flask, request, jsonify

from bots_api.api.telegram import TelegramVerifier
from bots_api.config import KV_URL, KV_REST_API_TOKEN, TELEGRAM_API_BASE_URL, TELEGRAM_TIMEOUT
from bots_api.errors import BotsApiError
from bots_api.services import RegistrationService, RetrievalService, StatsService
from bots_api.storage import BotStore, create_store

logger = logging.getLogger(__name__)

API_INFO = {
    'api': 'Telegram Bots API',
    'version': '1.0',
    'endpoints': {
        'POST /enter': 'Add a new bot (requires token)',
        'GET /getbot': 'Get random bot username',
        'GET /stats': 'Get statistics',
    },
    'note': 'Use Content-Type: application/json for POST requests',
}


def create_app(store: Optional[BotStore] = None, verifier: Optional[TelegramVerifier] = None) -> Flask:
    """
    Build the Flask app

    The store is chosen once here (Redis or in-memory fallback) and handed to
    every service; tests pass their own store and verifier.
    """
    if store is None:
        store = create_store(KV_URL, KV_REST_API_TOKEN)
    if verifier is None:
        verifier = TelegramVerifier(base_url=TELEGRAM_API_BASE_URL, timeout=TELEGRAM_TIMEOUT)

    registration = RegistrationService(store, verifier)
    retrieval = RetrievalService(store)
    stats = StatsService(store)

    app = Flask(__name__)
    app.extensions['bot_store'] = store

    @app.route('/enter', methods=['POST'])
    def enter():
        """
        Register a bot

        Expected JSON body:
        {
            "token": "<bot token from @BotFather>"
        }
        """
        try:
            data = request.get_json(silent=True) or {}
            token = data.get('token') if isinstance(data, dict) else None

            bot = asyncio.run(registration.register(token))

            return jsonify({
                'success': True,
                'message': 'Bot added successfully',
                'bot': bot
            }), 200

        except BotsApiError as e:
            if e.status_code >= 500:
                logger.error(f"/enter error: {e}")
            return jsonify(e.to_dict()), e.status_code
        except Exception as e:
            logger.exception(f"/enter error: {e}")
            return jsonify({'error': 'Server error', 'message': str(e)}), 500

    @app.route('/getbot', methods=['GET'])
    def get_bot():
        """Return a random registered bot"""
        try:
            bot = asyncio.run(retrieval.get_random_bot())
            return jsonify({'success': True, **bot}), 200

        except BotsApiError as e:
            if e.status_code >= 500:
                logger.error(f"/getbot error: {e}")
            return jsonify(e.to_dict()), e.status_code
        except Exception as e:
            logger.exception(f"/getbot error: {e}")
            return jsonify({'error': 'Database error', 'message': str(e)}), 500

    @app.route('/stats', methods=['GET'])
    def get_stats():
        """Index size; degrades to zero instead of failing"""
        return jsonify(asyncio.run(stats.get_stats())), 200

    @app.route('/', methods=['GET'])
    def index():
        return jsonify(API_INFO), 200

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(e):
        return jsonify({'error': 'Endpoint not found'}), 404

    return app


def run_server(port=3000, app: Optional[Flask] = None):
    """Run the Flask server"""
    app = app or create_app()
    logger.info(f"Starting Flask server on port {port}")
    app.run(host='0.0.0.0', port=port, debug=False, use_reloader=False)
