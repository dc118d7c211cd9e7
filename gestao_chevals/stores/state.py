"""
Gestão Chevals - Application State
Um container de estado por sessão de navegador, criado pela raiz de composição
"""
import logging
import secrets
import time
from typing import Dict, Optional

from gestao_chevals.backend import Backend, MockDatabase, create_backend
from gestao_chevals.core.config import Settings
from gestao_chevals.guard import RouteGuard
from .auth import AuthStore
from .bilheteria import CanalVendaStore
from .contratos import ContratoStore
from .empresas import EmpresaStore
from .entidades import EntidadeStore
from .financeiro import CategoriaStore, MovimentacaoStore
from .projetos import ProjetoStore
from .unidades import UnidadeStore
from .usuarios import UsuarioStore

logger = logging.getLogger(__name__)


class AppState:
    """Cliente de backend + store de autenticação + uma store por recurso"""

    def __init__(self, backend: Backend, sid: Optional[str] = None, settle_delay: float = 0.05):
        self.sid = sid
        self.backend = backend
        self.auth = AuthStore(backend)
        self.guard = RouteGuard(self.auth, settle_delay=settle_delay)
        self.entidades = EntidadeStore(backend)
        self.empresas = EmpresaStore(backend)
        self.unidades = UnidadeStore(backend)
        self.projetos = ProjetoStore(backend)
        self.contratos = ContratoStore(backend)
        self.movimentacoes = MovimentacaoStore(backend)
        self.categorias = CategoriaStore(backend)
        self.canais = CanalVendaStore(backend)
        self.usuarios = UsuarioStore(backend)

    async def close(self) -> None:
        self.auth.close()
        await self.backend.close()


class SessionRegistry:
    """Mapeia o identificador opaco da sessão (sid) para o seu AppState"""

    def __init__(self, settings: Settings, database: Optional[MockDatabase] = None):
        self.settings = settings
        # em modo mock todas as sessões enxergam as mesmas tabelas
        self.database = database
        if settings.MOCK_MODE and self.database is None:
            self.database = MockDatabase.with_demo_data()
        self._states: Dict[str, AppState] = {}
        self._expires: Dict[str, float] = {}

    def __len__(self) -> int:
        return len(self._states)

    async def _build(self, sid: Optional[str]) -> AppState:
        backend = await create_backend(self.settings, database=self.database)
        return AppState(backend, sid=sid, settle_delay=self.settings.AUTH_SETTLE_DELAY_MS / 1000)

    async def anonymous(self) -> AppState:
        """Estado descartável para requisições ainda sem sessão (login)"""
        state = await self._build(None)
        await state.auth.initialize()
        return state

    def adopt(self, state: AppState, expires_in: float) -> str:
        """Registra um estado autenticado válido por `expires_in` segundos e devolve seu sid"""
        state.sid = secrets.token_urlsafe(24)
        self._states[state.sid] = state
        self._expires[state.sid] = time.monotonic() + expires_in
        logger.info(f"Sessão aberta ({len(self._states)} ativas)")
        return state.sid

    async def sweep(self) -> None:
        """Encerra estados com token vencido ou cuja sessão no backend terminou"""
        now = time.monotonic()
        for sid, state in list(self._states.items()):
            if self._expires.get(sid, 0) <= now:
                logger.info("Sessão expirada")
                await self.close(sid)
            elif state.auth.initialized and not state.auth.is_authenticated:
                logger.info("Sessão encerrada no backend")
                await self.close(sid)

    async def get(self, sid: Optional[str]) -> Optional[AppState]:
        await self.sweep()
        if not sid:
            return None
        return self._states.get(sid)

    async def close(self, sid: str) -> None:
        state = self._states.pop(sid, None)
        self._expires.pop(sid, None)
        if state is not None:
            await state.close()
            logger.info(f"Sessão encerrada ({len(self._states)} ativas)")

    async def close_all(self) -> None:
        for sid in list(self._states):
            await self.close(sid)
