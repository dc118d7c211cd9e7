from .base import AuthSession, AuthUser, Backend, SessionEvent
from .mock import MOCK_CREDENTIALS, MOCK_USER_ID, MockBackend, MockDatabase
from .factory import create_backend, log_backend_mode

__all__ = [
    "AuthSession",
    "AuthUser",
    "Backend",
    "SessionEvent",
    "MOCK_CREDENTIALS",
    "MOCK_USER_ID",
    "MockBackend",
    "MockDatabase",
    "create_backend",
    "log_backend_mode",
]
