"""
Gestão Chevals - Auth Store
Sessão do usuário: restauração, login/logout, troca de senha e perfil
"""
import asyncio
import enum
import logging
from typing import Callable, List, Optional

from pydantic import ValidationError

from gestao_chevals.backend import AuthSession, AuthUser, Backend, SessionEvent
from gestao_chevals.core.errors import BackendError, error_message
from gestao_chevals.models import Usuario
from gestao_chevals.schemas.auth import ActionResult, SignInResult

logger = logging.getLogger(__name__)

PROFILE_TABLE = "users"

Listener = Callable[["AuthStore"], None]


class AuthStatus(str, enum.Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"


class AuthStore:
    """Estado de autenticação de uma sessão de navegador"""

    def __init__(self, backend: Backend):
        self.backend = backend
        self.user: Optional[AuthUser] = None
        self.profile: Optional[Usuario] = None
        self.loading = False
        self.error: Optional[str] = None
        self.initialized = False
        self.status = AuthStatus.UNINITIALIZED
        self._init_task: Optional[asyncio.Future] = None
        self._unsubscribe: Optional[Callable[[], None]] = None
        self._listeners: List[Listener] = []

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    async def _load_profile(self, user_id: str) -> Optional[Usuario]:
        try:
            rows = await self.backend.select(PROFILE_TABLE, filters={"id": user_id})
        except BackendError as e:
            logger.error(f"Erro ao buscar perfil: {e}")
            return None
        if not rows:
            return None
        try:
            return Usuario.model_validate(rows[0])
        except ValidationError as e:
            logger.error(f"Perfil de {user_id} em formato inválido: {e.error_count()} erro(s)")
            return None

    async def _clear_first_login(self, user_id: str) -> None:
        try:
            await self.backend.update(PROFILE_TABLE, {"id": user_id}, {"primeiro_login": False})
        except BackendError as e:
            # sessão já está aberta; a troca de senha continua sendo pedida
            logger.warning(f"Não foi possível limpar primeiro_login de {user_id}: {error_message(e)}")

    # Inicialização

    async def initialize(self) -> None:
        """Restaura a sessão persistida; chamadas concorrentes compartilham a mesma execução"""
        if self.initialized:
            return
        if self._init_task is None:
            self._init_task = asyncio.ensure_future(self._restore())
        await self._init_task

    async def _restore(self) -> None:
        self.status = AuthStatus.INITIALIZING
        self.loading = True
        try:
            session = await self.backend.get_session()
            if session is not None:
                self.user = session.user
                self.profile = await self._load_profile(session.user.id)
                logger.info(f"Sessão restaurada para {session.user.email}")
            else:
                self.user = None
                self.profile = None
        except BackendError as e:
            self.error = error_message(e)
            logger.error(f"Erro ao restaurar sessão: {self.error}")
        finally:
            self.loading = False
            self.initialized = True
            self.status = AuthStatus.READY

        self._unsubscribe = self.backend.on_session_change(self._on_session_change)
        self._notify()

    async def _on_session_change(self, event: SessionEvent, session: Optional[AuthSession]) -> None:
        if event == SessionEvent.SIGNED_IN and session is not None:
            self.user = session.user
            self.profile = await self._load_profile(session.user.id)
        elif event == SessionEvent.SIGNED_OUT:
            self.user = None
            self.profile = None
        elif event == SessionEvent.USER_UPDATED and session is not None:
            self.user = session.user
        else:
            return
        logger.debug(f"Evento de sessão: {event.value}")
        self._notify()

    # Operações

    async def sign_in(self, email: str, password: str) -> SignInResult:
        self.loading = True
        self.error = None
        try:
            session = await self.backend.sign_in(email, password)
            profile = await self._load_profile(session.user.id)

            # senha padrão: limpa o flag e pede a troca sem tratar como falha
            requires_password_change = bool(profile and profile.primeiro_login)
            if requires_password_change:
                await self._clear_first_login(session.user.id)

            self.user = session.user
            self.profile = profile
            logger.info(f"Login realizado: {email}")
            return SignInResult(success=True, requires_password_change=requires_password_change)
        except BackendError as e:
            self.error = error_message(e)
            logger.warning(f"Falha no login de {email}: {self.error}")
            return SignInResult(success=False, error=self.error)
        finally:
            self.loading = False
            self._notify()

    async def sign_out(self) -> None:
        self.loading = True
        try:
            await self.backend.sign_out()
        except BackendError as e:
            self.error = error_message(e)
            logger.warning(f"Erro ao encerrar sessão no servidor: {self.error}")
        finally:
            self.user = None
            self.profile = None
            self.loading = False
            self._notify()

    async def change_password(self, current_password: Optional[str], new_password: str) -> ActionResult:
        """
        Troca a senha do usuário logado.

        Com `current_password` a senha atual é conferida antes da troca;
        sem ela (primeiro acesso) a troca é direta.
        """
        if self.user is None:
            return ActionResult(success=False, error="Usuário não autenticado")

        self.loading = True
        self.error = None
        try:
            if current_password is not None:
                try:
                    await self.backend.sign_in(self.user.email, current_password)
                except BackendError:
                    self.error = "Senha atual incorreta"
                    return ActionResult(success=False, error=self.error)

            await self.backend.update_password(new_password)
            logger.info(f"Senha alterada: {self.user.email}")
            return ActionResult(success=True)
        except BackendError as e:
            self.error = error_message(e)
            logger.error(f"Erro ao alterar senha: {self.error}")
            return ActionResult(success=False, error=self.error)
        finally:
            self.loading = False

    def update_user_profile(self, profile: Usuario) -> None:
        self.profile = profile
        self._notify()

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
