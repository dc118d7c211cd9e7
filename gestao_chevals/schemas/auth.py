"""
Gestão Chevals - Auth Schemas
Schemas de autenticação e resultados das operações de sessão
"""
import re
from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator, model_validator

from gestao_chevals.models import Usuario
from .base import FormSchema, field_error

SENHA_FORTE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")


class LoginForm(FormSchema):
    required_messages = {"email": "E-mail é obrigatório", "password": "Senha é obrigatória"}
    invalid_messages = {"email": "E-mail inválido"}

    email: EmailStr
    password: str


class PasswordChangeForm(FormSchema):
    """Troca de senha; senha atual omitida apenas no fluxo de primeiro acesso"""
    required_messages = {
        "new_password": "Nova senha é obrigatória",
        "confirm_password": "Confirme a nova senha",
    }

    current_password: Optional[str] = None
    new_password: str
    confirm_password: str

    @field_validator("new_password")
    @classmethod
    def senha_forte(cls, v: str) -> str:
        if len(v) < 8:
            raise field_error("new_password", "A senha deve ter pelo menos 8 caracteres")
        if not SENHA_FORTE.match(v):
            raise field_error(
                "new_password",
                "A senha deve conter pelo menos uma letra minúscula, uma maiúscula e um número",
            )
        return v

    @model_validator(mode="after")
    def confirmacao(self):
        if self.new_password != self.confirm_password:
            raise field_error("confirm_password", "As senhas não coincidem")
        return self


class SignInResult(BaseModel):
    """Resultado do login: troca de senha pendente é sucesso, não erro"""
    success: bool
    requires_password_change: bool = False
    error: Optional[str] = None


class ActionResult(BaseModel):
    success: bool
    error: Optional[str] = None


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    requires_password_change: bool = False
    user_id: str
    email: Optional[str] = None
    profile: Optional[Usuario] = None


class SessionInfo(BaseModel):
    """Resposta de /api/auth/me"""
    user_id: str
    email: Optional[str] = None
    profile: Optional[Usuario] = None
