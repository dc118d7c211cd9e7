"""
Gestão Chevals - Mock Backend
Backend em memória para desenvolvimento sem banco de dados (MOCK_MODE=true)
"""
import asyncio
import copy
import inspect
import logging
import secrets
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

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

MOCK_USER_ID = "mock-user-id"
MOCK_CREDENTIALS = {
    "email": "admin@gestao-chevals.com",
    "password": "123456",
}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class MockDatabase:
    """Tabelas e credenciais compartilhadas entre as sessões em modo mock"""

    def __init__(self):
        self.tables: Dict[str, List[Row]] = {}
        self.credentials: Dict[str, str] = {}
        self.auth_users: Dict[str, AuthUser] = {}

    def add_user(
        self,
        email: str,
        password: str,
        user_id: Optional[str] = None,
        nome: str = "Usuário",
        primeiro_login: bool = False,
        perfil_id: int = 1,
    ) -> AuthUser:
        """Cria identidade de autenticação e linha de perfil em `users`"""
        user = AuthUser(id=user_id or str(uuid.uuid4()), email=email)
        self.credentials[email] = password
        self.auth_users[email] = user
        now = _now()
        self.tables.setdefault("users", []).append({
            "id": user.id,
            "email": email,
            "nome": nome,
            "perfil_id": perfil_id,
            "ativo": True,
            "primeiro_login": primeiro_login,
            "created_at": now,
            "updated_at": now,
        })
        return user

    def seed(self, table: str, rows: List[Row]) -> None:
        now = _now()
        for row in rows:
            self.tables.setdefault(table, []).append({"created_at": now, "updated_at": now, **row})

    @classmethod
    def with_demo_data(cls) -> "MockDatabase":
        """Banco mock com o usuário administrador e os dados de demonstração"""
        db = cls()
        db.add_user(
            MOCK_CREDENTIALS["email"],
            MOCK_CREDENTIALS["password"],
            user_id=MOCK_USER_ID,
            nome="Administrador",
        )
        db.seed("perfis", [
            {"id": 1, "nome": "Administrador", "descricao": "Acesso total", "ativo": True},
        ])
        db.seed("empresas", [
            {"id": "1", "nome": "Chevals Eventos", "cnpj": "12.345.678/0001-90", "ativo": True},
            {"id": "2", "nome": "Eventos Premium", "cnpj": "98.765.432/0001-10", "ativo": True},
        ])
        db.seed("unidades", [
            {"id": "3", "nome": "Salão Principal", "empresa_id": "1", "capacidade": 500, "ativo": True},
            {"id": "4", "nome": "Área VIP", "empresa_id": "1", "capacidade": 100, "ativo": True},
        ])
        db.seed("entidades", [
            {
                "id": "1", "nome": "João Silva", "e_cliente": True, "e_parceiro": False,
                "e_fornecedor": False, "documento": "123.456.789-00", "email": "joao@email.com",
                "telefone": "(11) 98765-4321", "ativo": True,
            },
            {
                "id": "2", "nome": "Maria Santos", "e_cliente": False, "e_parceiro": True,
                "e_fornecedor": False, "documento": "987.654.321-00", "email": "maria@email.com",
                "telefone": "(11) 91234-5678", "ativo": True,
            },
        ])
        db.seed("projetos", [
            {
                "id": "1", "nome": "Festa Corporativa 2025", "descricao": "Evento anual da empresa",
                "data_inicio": "2025-12-15", "data_fim": "2025-12-15", "status": "planejamento",
                "espaco_id": "3",
            },
            {
                "id": "2", "nome": "Casamento - Ana e Carlos", "descricao": "Cerimônia e recepção",
                "data_inicio": "2025-11-20", "data_fim": "2025-11-20", "status": "aprovado",
                "espaco_id": "3",
            },
        ])
        db.seed("categorias_financeiras", [
            {"id": "1", "nome": "Locação", "tipo": "receita", "cor": "#16a34a", "ativo": True},
            {"id": "2", "nome": "Decoração", "tipo": "despesa", "cor": "#dc2626", "ativo": True},
        ])
        db.seed("movimentacoes_financeiras", [
            {
                "id": "1", "tipo": "receita", "categoria": "Locação",
                "descricao": "Pagamento evento corporativo", "valor": 15000.00,
                "data_vencimento": "2025-10-25", "data_pagamento": "2025-10-20",
                "status": "pago", "projeto_id": "1",
            },
            {
                "id": "2", "tipo": "despesa", "categoria": "Decoração",
                "descricao": "Fornecedor de decoração", "valor": 3500.00,
                "data_vencimento": "2025-10-30", "data_pagamento": None,
                "status": "pendente", "projeto_id": "2",
            },
        ])
        db.seed("canais_venda", [
            {"id": "1", "nome": "Bilheteria Local", "tipo": "presencial", "taxa_servico": 0, "ativo": True},
        ])
        return db


def _matches(row: Row, filters: Optional[Filters]) -> bool:
    for column, value in (filters or {}).items():
        current = row.get(column)
        if value is None:
            if current is not None:
                return False
        elif current != value and (current is None or str(current) != str(value)):
            return False
    return True


def _sort_key(column: str):
    def key(row: Row):
        value = row.get(column)
        return (value is None, value if value is not None else 0)
    return key


class MockBackend(Backend):
    """Backend em memória; cada instância mantém sua própria sessão"""

    def __init__(self, database: MockDatabase, latency: float = 0.0):
        self.database = database
        self.latency = latency
        self._session: Optional[AuthSession] = None
        self._listeners: List[SessionListener] = []

    async def _delay(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    def _table(self, table: str) -> List[Row]:
        return self.database.tables.setdefault(table, [])

    # Tabelas

    async def select(
        self,
        table: str,
        filters: Optional[Filters] = None,
        order: Optional[Order] = None,
        columns: str = "*",
    ) -> List[Row]:
        await self._delay()
        rows = [copy.deepcopy(r) for r in self._table(table) if _matches(r, filters)]
        # ordenações estáveis aplicadas da última para a primeira chave
        for column, desc in reversed(list(order or ())):
            rows.sort(key=_sort_key(column), reverse=desc)
        if columns != "*":
            wanted = [c.strip() for c in columns.split(",")]
            rows = [{c: r.get(c) for c in wanted} for r in rows]
        return rows

    async def insert(self, table: str, row: Row) -> Row:
        await self._delay()
        now = _now()
        record = {**copy.deepcopy(row), "id": str(uuid.uuid4()), "created_at": now, "updated_at": now}
        self._table(table).append(record)
        return copy.deepcopy(record)

    async def update(self, table: str, filters: Filters, patch: Row) -> List[Row]:
        await self._delay()
        updated = []
        for row in self._table(table):
            if _matches(row, filters):
                row.update(copy.deepcopy(patch))
                row["updated_at"] = _now()
                updated.append(copy.deepcopy(row))
        return updated

    async def delete(self, table: str, filters: Filters) -> None:
        await self._delay()
        rows = self._table(table)
        rows[:] = [r for r in rows if not _matches(r, filters)]

    # Autenticação

    async def _emit(self, event: SessionEvent, session: Optional[AuthSession]) -> None:
        for listener in list(self._listeners):
            result = listener(event, session)
            if inspect.isawaitable(result):
                await result

    async def sign_in(self, email: str, password: str) -> AuthSession:
        await self._delay()
        if self.database.credentials.get(email) != password:
            logger.info(f"[MOCK MODE] Credenciais inválidas para {email}")
            raise BackendError("Credenciais inválidas")
        user = self.database.auth_users[email]
        self._session = AuthSession(user=user, access_token=f"mock-{secrets.token_hex(8)}")
        await self._emit(SessionEvent.SIGNED_IN, self._session)
        return self._session

    async def sign_out(self) -> None:
        await self._delay()
        self._session = None
        await self._emit(SessionEvent.SIGNED_OUT, None)

    async def get_session(self) -> Optional[AuthSession]:
        return self._session

    def on_session_change(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def update_password(self, new_password: str) -> None:
        await self._delay()
        if self._session is None:
            raise BackendError("Sessão expirada. Faça login novamente")
        self.database.credentials[self._session.user.email] = new_password
        await self._emit(SessionEvent.USER_UPDATED, self._session)

    async def delete_user(self, user_id: str) -> None:
        await self._delay()
        email = next(
            (e for e, u in self.database.auth_users.items() if u.id == user_id),
            None,
        )
        if email is None:
            raise BackendError("Usuário não encontrado")
        del self.database.auth_users[email]
        self.database.credentials.pop(email, None)
        # cascade do auth para a tabela users
        users = self._table("users")
        users[:] = [r for r in users if str(r.get("id")) != user_id]
