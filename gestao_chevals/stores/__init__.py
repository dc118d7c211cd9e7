from .base import ResourceStore
from .auth import AuthStatus, AuthStore
from .entidades import EntidadeStore
from .empresas import EmpresaStore
from .unidades import UnidadeStore
from .projetos import ProjetoStore
from .contratos import ContratoStore
from .financeiro import CategoriaStore, MovimentacaoStore, ResumoFinanceiro
from .bilheteria import CanalVendaStore
from .usuarios import UsuarioStore
from .state import AppState, SessionRegistry

__all__ = [
    "ResourceStore",
    "AuthStatus",
    "AuthStore",
    "EntidadeStore",
    "EmpresaStore",
    "UnidadeStore",
    "ProjetoStore",
    "ContratoStore",
    "CategoriaStore",
    "MovimentacaoStore",
    "ResumoFinanceiro",
    "CanalVendaStore",
    "UsuarioStore",
    "AppState",
    "SessionRegistry",
]
