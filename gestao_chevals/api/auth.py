"""
Gestão Chevals - Auth API
Login, logout, troca de senha e dependências de sessão
"""
from datetime import timedelta
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from slowapi import Limiter
from slowapi.util import get_remote_address

from gestao_chevals.core import create_access_token, settings, verify_access_token
from gestao_chevals.guard import GuardStatus
from gestao_chevals.schemas import LoginForm, LoginResponse, PasswordChangeForm, SessionInfo
from gestao_chevals.stores import AppState, SessionRegistry
from .common import validate_or_422

router = APIRouter(prefix="/auth", tags=["Authentication"])
security = HTTPBearer(auto_error=False)
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)


class LoginRequired(Exception):
    """Rota protegida acessada sem sessão válida"""

    def __init__(self, location: str):
        super().__init__(location)
        self.location = location


def get_sessions(request: Request) -> SessionRegistry:
    return request.app.state.sessions


async def get_app_state(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    sessions: SessionRegistry = Depends(get_sessions),
) -> Optional[AppState]:
    """Estado da sessão identificada pelo token, se houver"""
    sid = None
    if credentials is not None:
        payload = verify_access_token(credentials.credentials)
        if payload:
            sid = payload.get("sid")
    return await sessions.get(sid)


async def require_user(
    request: Request,
    state: Optional[AppState] = Depends(get_app_state),
) -> AppState:
    """Dependency das rotas protegidas: passa pelo guard da sessão"""
    location = request.url.path
    if request.url.query:
        location = f"{location}?{request.url.query}"

    if state is None:
        raise LoginRequired(location)

    decision = await state.guard.resolve(location)
    if decision.status != GuardStatus.ALLOW:
        raise LoginRequired(location)
    return state


@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    data: Dict[str, Any] = Body(...),
    sessions: SessionRegistry = Depends(get_sessions),
):
    """Login com e-mail e senha"""
    form = validate_or_422(LoginForm, data)

    state = await sessions.anonymous()
    result = await state.auth.sign_in(form.email, form.password)
    if not result.success:
        if state.auth.is_authenticated:
            await state.auth.sign_out()
        await state.close()
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=result.error
        )

    expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    sid = sessions.adopt(state, expires_in=expires.total_seconds())
    user = state.auth.user
    access_token = create_access_token(
        data={"sub": user.id, "email": user.email, "sid": sid},
        expires_delta=expires
    )

    return LoginResponse(
        access_token=access_token,
        expires_in=int(expires.total_seconds()),
        requires_password_change=result.requires_password_change,
        user_id=user.id,
        email=user.email,
        profile=state.auth.profile,
    )


@router.post("/logout")
async def logout(
    state: AppState = Depends(require_user),
    sessions: SessionRegistry = Depends(get_sessions),
):
    """Encerra a sessão no backend e descarta o estado local"""
    await state.auth.sign_out()
    await sessions.close(state.sid)
    return {"message": "Logout realizado com sucesso"}


@router.post("/change-password")
async def change_password(
    data: Dict[str, Any] = Body(...),
    state: AppState = Depends(require_user),
):
    """Troca a senha do usuário logado"""
    form = validate_or_422(PasswordChangeForm, data)

    result = await state.auth.change_password(form.current_password, form.new_password)
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.error
        )

    return {"message": "Senha alterada com sucesso"}


@router.get("/me", response_model=SessionInfo)
async def get_me(state: AppState = Depends(require_user)):
    """Retorna o usuário e o perfil da sessão atual"""
    return SessionInfo(
        user_id=state.auth.user.id,
        email=state.auth.user.email,
        profile=state.auth.profile,
    )
