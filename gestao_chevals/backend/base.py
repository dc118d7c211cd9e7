"""
Gestão Chevals - Backend Contract
Contrato estreito com o backend hospedado: CRUD por tabela + sub-API de autenticação
"""
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple, Union
import enum

from pydantic import BaseModel

Row = Dict[str, Any]
Filters = Dict[str, Any]
# (coluna, descendente)
Order = Sequence[Tuple[str, bool]]


class SessionEvent(str, enum.Enum):
    """Eventos de mudança de sessão emitidos pelo backend"""
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    USER_UPDATED = "USER_UPDATED"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"


class AuthUser(BaseModel):
    """Identidade de autenticação (distinta do perfil da aplicação)"""
    id: str
    email: Optional[str] = None


class AuthSession(BaseModel):
    """Sessão autenticada mantida pelo cliente do backend"""
    user: AuthUser
    access_token: Optional[str] = None


SessionListener = Callable[[SessionEvent, Optional[AuthSession]], Union[Awaitable[None], None]]


class Backend(ABC):
    """Cliente do backend usado por todas as stores"""

    # Tabelas

    @abstractmethod
    async def select(
        self,
        table: str,
        filters: Optional[Filters] = None,
        order: Optional[Order] = None,
        columns: str = "*",
    ) -> List[Row]:
        ...

    @abstractmethod
    async def insert(self, table: str, row: Row) -> Row:
        ...

    @abstractmethod
    async def update(self, table: str, filters: Filters, patch: Row) -> List[Row]:
        ...

    @abstractmethod
    async def delete(self, table: str, filters: Filters) -> None:
        ...

    # Autenticação

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> AuthSession:
        ...

    @abstractmethod
    async def sign_out(self) -> None:
        ...

    @abstractmethod
    async def get_session(self) -> Optional[AuthSession]:
        ...

    @abstractmethod
    def on_session_change(self, listener: SessionListener) -> Callable[[], None]:
        """Registra listener e retorna função para cancelar a inscrição"""

    @abstractmethod
    async def update_password(self, new_password: str) -> None:
        ...

    @abstractmethod
    async def delete_user(self, user_id: str) -> None:
        """Remove usuário do provedor de autenticação (API administrativa)"""

    async def close(self) -> None:
        """Libera recursos do cliente"""
        return None
