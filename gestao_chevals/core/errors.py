"""
Gestão Chevals - Errors
Erros comuns entre backend, stores e rotas
"""
from typing import Optional


class ConfigurationError(RuntimeError):
    """Configuração de ambiente inválida"""


class BackendError(Exception):
    """Falha de uma chamada remota (rede, autenticação ou rejeição do banco)"""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return self.message


def error_message(exc: BaseException, fallback: str = "Erro inesperado") -> str:
    """Extrai mensagem legível de uma exceção"""
    message = getattr(exc, "message", None) or str(exc)
    return message or fallback
