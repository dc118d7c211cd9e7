"""
Gestão Chevals - Supabase Backend
Implementação do contrato sobre o cliente assíncrono do Supabase
"""
import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, List, Optional, Set

import httpx
from supabase import AsyncClient, AuthError, PostgrestAPIError, acreate_client

from gestao_chevals.core.errors import BackendError
from .base import (
    AuthSession,
    AuthUser,
    Backend,
    Filters,
    Order,
    Row,
    SessionEvent,
    SessionListener,
)

logger = logging.getLogger(__name__)


class SupabaseBackend(Backend):
    """Backend real: tabelas via PostgREST, autenticação via Supabase Auth"""

    def __init__(self, client: AsyncClient, url: str, service_role_key: Optional[str] = None):
        self.client = client
        self._url = url
        self._service_role_key = service_role_key
        self._admin_client: Optional[AsyncClient] = None
        self._tasks: Set[asyncio.Future] = set()

    @classmethod
    async def create(cls, url: str, key: str, service_role_key: Optional[str] = None) -> "SupabaseBackend":
        client = await acreate_client(url, key)
        return cls(client, url, service_role_key)

    async def _execute(self, awaitable: Awaitable[Any]) -> Any:
        """Executa chamada remota convertendo erros do SDK em BackendError"""
        try:
            return await awaitable
        except PostgrestAPIError as e:
            logger.error(f"Erro PostgREST: {e.message} ({e.code})")
            raise BackendError(e.message or str(e), code=e.code) from e
        except AuthError as e:
            logger.info(f"Erro de autenticação: {e.message}")
            raise BackendError(e.message, code=getattr(e, "code", None)) from e
        except httpx.HTTPError as e:
            logger.error(f"Falha de comunicação com o Supabase: {e}")
            raise BackendError(f"Falha de comunicação com o servidor: {e}") from e

    @staticmethod
    def _apply_filters(query, filters: Optional[Filters]):
        for column, value in (filters or {}).items():
            if value is None:
                query = query.is_(column, "null")
            else:
                query = query.eq(column, value)
        return query

    # Tabelas

    async def select(
        self,
        table: str,
        filters: Optional[Filters] = None,
        order: Optional[Order] = None,
        columns: str = "*",
    ) -> List[Row]:
        query = self._apply_filters(self.client.table(table).select(columns), filters)
        for column, desc in order or ():
            query = query.order(column, desc=desc)
        response = await self._execute(query.execute())
        return response.data or []

    async def insert(self, table: str, row: Row) -> Row:
        response = await self._execute(self.client.table(table).insert(row).execute())
        if not response.data:
            raise BackendError("Nenhum registro retornado pelo servidor")
        return response.data[0]

    async def update(self, table: str, filters: Filters, patch: Row) -> List[Row]:
        query = self._apply_filters(self.client.table(table).update(patch), filters)
        response = await self._execute(query.execute())
        return response.data or []

    async def delete(self, table: str, filters: Filters) -> None:
        query = self._apply_filters(self.client.table(table).delete(), filters)
        await self._execute(query.execute())

    # Autenticação

    @staticmethod
    def _to_session(session) -> Optional[AuthSession]:
        if session is None or session.user is None:
            return None
        return AuthSession(
            user=AuthUser(id=str(session.user.id), email=session.user.email),
            access_token=session.access_token,
        )

    async def sign_in(self, email: str, password: str) -> AuthSession:
        response = await self._execute(
            self.client.auth.sign_in_with_password({"email": email, "password": password})
        )
        session = self._to_session(response.session)
        if session is None:
            raise BackendError("Usuário não encontrado")
        return session

    async def sign_out(self) -> None:
        await self._execute(self.client.auth.sign_out())

    async def get_session(self) -> Optional[AuthSession]:
        session = await self._execute(self.client.auth.get_session())
        return self._to_session(session)

    def on_session_change(self, listener: SessionListener) -> Callable[[], None]:
        def relay(event, session):
            try:
                parsed = SessionEvent(event)
            except ValueError:
                # INITIAL_SESSION, PASSWORD_RECOVERY etc. não interessam às stores
                return
            result = listener(parsed, self._to_session(session))
            if inspect.isawaitable(result):
                task = asyncio.ensure_future(result)
                self._tasks.add(task)
                task.add_done_callback(self._tasks.discard)

        subscription = self.client.auth.on_auth_state_change(relay)
        return subscription.unsubscribe

    async def update_password(self, new_password: str) -> None:
        await self._execute(self.client.auth.update_user({"password": new_password}))

    async def delete_user(self, user_id: str) -> None:
        if not self._service_role_key:
            raise BackendError("Chave de serviço do Supabase não configurada")
        if self._admin_client is None:
            self._admin_client = await acreate_client(self._url, self._service_role_key)
        await self._execute(self._admin_client.auth.admin.delete_user(user_id))

    async def close(self) -> None:
        for task in list(self._tasks):
            task.cancel()
