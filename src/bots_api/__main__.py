import logging
from bots_api.core.server import run_server
from bots_api.config import PORT

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)
logger = logging.getLogger(__name__)


def main():
    """Main entry point - starts the Flask API server"""
    logger.info("Starting Telegram Bots API")
    logger.info("Endpoints: POST /enter, GET /getbot, GET /stats")

    try:
        run_server(PORT)
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == '__main__':
    main()
