import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Key-value store (Redis protocol, e.g. Vercel KV / Upstash)
# Unset URL = in-memory store, nothing survives a restart
KV_URL = os.getenv('KV_URL') or os.getenv('REDIS_URL')
KV_REST_API_TOKEN = os.getenv('KV_REST_API_TOKEN')

# Store keys
BOT_INDEX_KEY = 'all_bots'
BOT_RECORD_PREFIX = 'bot:'

# Telegram Bot API
# For E2E testing with mock server (None in production = use official Telegram API)
TELEGRAM_API_BASE_URL = os.getenv('TELEGRAM_API_BASE_URL')
TELEGRAM_TIMEOUT = float(os.getenv('TELEGRAM_TIMEOUT', 10))

# Flask Configuration
PORT = int(os.getenv('PORT', 3000))
