"""Core functionality for the jobportal package."""

from .logging import setup_logging
from .config import Settings, get_settings
from .backend import BackendClient
from .session import UserSession, AuthService

__all__ = [
    'setup_logging',
    'Settings',
    'get_settings',
    'BackendClient',
    'UserSession',
    'AuthService',
]
