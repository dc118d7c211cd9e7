from .base import FieldErrors, FormSchema, field_error
from .auth import (
    ActionResult,
    LoginForm,
    LoginResponse,
    PasswordChangeForm,
    SessionInfo,
    SignInResult,
)
from .cadastros import EmpresaForm, EntidadeForm, ProjetoForm, UnidadeForm
from .contrato import ContratoForm
from .financeiro import CategoriaForm, MovimentacaoForm
from .bilheteria import CanalVendaForm
from .usuario import UsuarioForm

__all__ = [
    "FieldErrors",
    "FormSchema",
    "field_error",
    "ActionResult",
    "LoginForm",
    "LoginResponse",
    "PasswordChangeForm",
    "SessionInfo",
    "SignInResult",
    "EmpresaForm",
    "EntidadeForm",
    "ProjetoForm",
    "UnidadeForm",
    "ContratoForm",
    "CategoriaForm",
    "MovimentacaoForm",
    "CanalVendaForm",
    "UsuarioForm",
]
