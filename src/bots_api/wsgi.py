"""WSGI entry point, e.g. ``gunicorn bots_api.wsgi:app``"""
import logging

from bots_api.core.server import create_app

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)

app = create_app()
