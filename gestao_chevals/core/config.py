"""
Gestão Chevals - Configuration
"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
import secrets
from pathlib import Path
from dotenv import load_dotenv

# Carrega .env da raiz do projeto com override para sobrescrever variáveis do sistema
env_file = Path(__file__).parent.parent.parent / ".env"
if env_file.exists():
    load_dotenv(env_file, override=True)

MOCK_BACKEND_URL = "https://mock.supabase.co"
MOCK_BACKEND_KEY = "mock-anon-key"


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Gestão Chevals"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Supabase
    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None

    # Modo mock (sem banco de dados)
    MOCK_MODE: bool = False
    MOCK_LATENCY_MS: int = 300

    @property
    def backend_url(self) -> Optional[str]:
        """URL do Supabase, ou placeholder em modo mock"""
        return MOCK_BACKEND_URL if self.MOCK_MODE else self.SUPABASE_URL

    @property
    def backend_key(self) -> Optional[str]:
        """Chave pública do Supabase, ou placeholder em modo mock"""
        return MOCK_BACKEND_KEY if self.MOCK_MODE else self.SUPABASE_ANON_KEY

    # Sessão
    SECRET_KEY: str = secrets.token_urlsafe(32)
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 720
    AUTH_SETTLE_DELAY_MS: int = 50

    # Rate limiting do login
    RATE_LIMIT_ENABLED: bool = True
    LOGIN_RATE_LIMIT: str = "10/minute"

    # CORS
    CORS_ORIGINS: list = ["*"]

    class Config:
        extra = "ignore"
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
