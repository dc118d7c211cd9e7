"""
Gestão Chevals - Backend Factory
Escolhe entre o Supabase real e o backend mock conforme MOCK_MODE
"""
import logging
from typing import Optional

from gestao_chevals.core.config import Settings
from gestao_chevals.core.errors import ConfigurationError
from .base import Backend
from .mock import MOCK_CREDENTIALS, MockBackend, MockDatabase
from .supabase_backend import SupabaseBackend

logger = logging.getLogger(__name__)


def log_backend_mode(settings: Settings) -> None:
    if settings.MOCK_MODE:
        logger.warning("[MOCK MODE] Modo mock está ATIVO")
        logger.warning(f"[MOCK MODE] Email aceito: {MOCK_CREDENTIALS['email']}")
        logger.warning(f"[MOCK MODE] Senha aceita: {MOCK_CREDENTIALS['password']}")
    else:
        logger.info(f"[NORMAL MODE] Conectando ao Supabase em {settings.backend_url}")


async def create_backend(settings: Settings, database: Optional[MockDatabase] = None) -> Backend:
    """Cria um cliente de backend novo (um por sessão de navegador)"""
    if settings.MOCK_MODE:
        return MockBackend(
            database if database is not None else MockDatabase.with_demo_data(),
            latency=settings.MOCK_LATENCY_MS / 1000,
        )

    if not settings.backend_url or not settings.backend_key:
        raise ConfigurationError("Missing Supabase environment variables")

    return await SupabaseBackend.create(
        settings.backend_url,
        settings.backend_key,
        service_role_key=settings.SUPABASE_SERVICE_ROLE_KEY,
    )
