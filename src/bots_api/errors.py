"""Errors raised by the services and rendered by the HTTP layer"""
from typing import Optional


class BotsApiError(Exception):
    """Base error; carries the HTTP status and the JSON payload"""

    status_code = 500
    error = 'Server error'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.error)
        self.message = message

    def to_dict(self) -> dict:
        payload = {'error': self.error}
        if self.message:
            payload['message'] = self.message
        return payload


class MissingToken(BotsApiError):
    status_code = 400
    error = 'Token required'


class InvalidToken(BotsApiError):
    """Telegram rejected the token; details holds the upstream description"""

    status_code = 400
    error = 'Invalid bot token'

    def __init__(self, details: Optional[str] = None):
        super().__init__(details)
        self.details = details

    def to_dict(self) -> dict:
        return {'error': self.error, 'details': self.details}


class NoBotsAvailable(BotsApiError):
    status_code = 404
    error = 'No bots available'

    def __init__(self, message: str = 'Database is empty. Add bots first via POST /enter'):
        super().__init__(message)


class ServerError(BotsApiError):
    """Catch-all runtime failure; error label depends on the endpoint"""

    def __init__(self, message: Optional[str] = None, error: str = 'Server error'):
        super().__init__(message)
        self.error = error


class StoreUnavailable(BotsApiError):
    """Key-value store could not be reached"""

    error = 'Database error'
