"""
Gestão Chevals - Main Application
Sistema de gestão de eventos sobre Supabase
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from gestao_chevals.core import ConfigurationError, settings
from gestao_chevals.backend import log_backend_mode
from gestao_chevals.guard import login_redirect
from gestao_chevals.stores import SessionRegistry
from gestao_chevals.api import (
    LoginRequired,
    auth_router,
    entidades_router,
    empresas_router,
    unidades_router,
    projetos_router,
    contratos_router,
    financeiro_router,
    bilheteria_router,
    usuarios_router,
    dashboard_router,
    limiter,
)

# Rate limiting
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle do aplicativo"""
    # Startup
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    if getattr(app.state, "sessions", None) is None:
        app.state.sessions = SessionRegistry(settings)
    log_backend_mode(app.state.sessions.settings)

    yield

    # Shutdown
    logger.info("Shutting down...")
    await app.state.sessions.close_all()


# Middleware de headers de seguranca
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adiciona headers de seguranca em todas as respostas"""
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        # Respostas de autenticacao nunca vao para cache
        if "/auth" in request.url.path or "/login" in request.url.path:
            response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate"
            response.headers["Pragma"] = "no-cache"
        return response


# Cria aplicação
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Gestão de contratos, espaços, projetos, bilheteria e financeiro de eventos",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None
)

# Configura rate limiter na aplicacao
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(LoginRequired)
async def login_required_handler(request: Request, exc: LoginRequired):
    """Sem sessão: volta para o login preservando a rota de origem"""
    return RedirectResponse(login_redirect(exc.location), status_code=303)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error(f"Configuração inválida: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


# Headers de seguranca (adicionar ANTES do CORS)
app.add_middleware(SecurityHeadersMiddleware)

# CORS (deve vir DEPOIS dos headers de seguranca)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth_router, prefix="/api")
app.include_router(entidades_router, prefix="/api")
app.include_router(empresas_router, prefix="/api")
app.include_router(unidades_router, prefix="/api")
app.include_router(projetos_router, prefix="/api")
app.include_router(contratos_router, prefix="/api")
app.include_router(financeiro_router, prefix="/api")
app.include_router(bilheteria_router, prefix="/api")
app.include_router(usuarios_router, prefix="/api")
app.include_router(dashboard_router, prefix="/api")


@app.get("/login")
async def login_page(next: Optional[str] = Query(None)):
    """Destino dos redirecionamentos do guard"""
    return {
        "message": "Faça login para continuar",
        "login_url": "/api/auth/login",
        "next": next or "/api/dashboard",
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "mock_mode": settings.MOCK_MODE,
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "gestao_chevals.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
