"""
Gestão Chevals - Route Guard
Libera rotas protegidas só depois que a sessão foi restaurada
"""
import asyncio
import enum
from typing import TYPE_CHECKING, Optional
from urllib.parse import urlencode

from pydantic import BaseModel

if TYPE_CHECKING:
    from gestao_chevals.stores.auth import AuthStore

LOGIN_PATH = "/login"


class GuardStatus(str, enum.Enum):
    PENDING = "pending"
    ALLOW = "allow"
    REDIRECT = "redirect"


class GuardDecision(BaseModel):
    status: GuardStatus
    redirect_to: Optional[str] = None


def login_redirect(location: str) -> str:
    """URL de login preservando a origem para retorno após autenticar"""
    return f"{LOGIN_PATH}?{urlencode({'next': location})}"


class RouteGuard:
    def __init__(self, auth: "AuthStore", settle_delay: float = 0.05):
        self.auth = auth
        self.settle_delay = settle_delay
        self.ready = False

    def decision(self, location: str) -> GuardDecision:
        """Estado derivado; nada é renderizado antes de `initialized` e do atraso de acomodação"""
        if not self.auth.initialized or not self.ready:
            return GuardDecision(status=GuardStatus.PENDING)
        if not self.auth.is_authenticated:
            return GuardDecision(status=GuardStatus.REDIRECT, redirect_to=login_redirect(location))
        return GuardDecision(status=GuardStatus.ALLOW)

    async def resolve(self, location: str) -> GuardDecision:
        if not self.ready:
            await self.auth.initialize()
            await asyncio.sleep(self.settle_delay)
            self.ready = True
        return self.decision(location)
