from .auth import router as auth_router, limiter, LoginRequired
from .entidades import router as entidades_router
from .empresas import router as empresas_router
from .unidades import router as unidades_router
from .projetos import router as projetos_router
from .contratos import router as contratos_router
from .financeiro import router as financeiro_router
from .bilheteria import router as bilheteria_router
from .usuarios import router as usuarios_router
from .dashboard import router as dashboard_router

__all__ = [
    "auth_router",
    "limiter",
    "LoginRequired",
    "entidades_router",
    "empresas_router",
    "unidades_router",
    "projetos_router",
    "contratos_router",
    "financeiro_router",
    "bilheteria_router",
    "usuarios_router",
    "dashboard_router",
]
