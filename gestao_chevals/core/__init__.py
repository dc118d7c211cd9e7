from .config import settings, get_settings
from .errors import BackendError, ConfigurationError, error_message
from .security import create_access_token, verify_access_token

__all__ = [
    "settings",
    "get_settings",
    "BackendError",
    "ConfigurationError",
    "error_message",
    "create_access_token",
    "verify_access_token",
]
