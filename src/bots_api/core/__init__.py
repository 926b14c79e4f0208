"""Core components: Flask server"""
from .server import create_app, run_server, API_INFO

__all__ = ["create_app", "run_server", "API_INFO"]
