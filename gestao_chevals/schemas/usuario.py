"""
Gestão Chevals - Usuário Schema
"""
from pydantic import EmailStr, Field

from .base import FormSchema


class UsuarioForm(FormSchema):
    required_messages = {
        "nome": "Nome é obrigatório",
        "email": "E-mail é obrigatório",
        "perfil_id": "Selecione um perfil",
    }
    invalid_messages = {
        "nome": "Nome deve ter no mínimo 3 caracteres",
        "email": "E-mail inválido",
        "perfil_id": "Selecione um perfil",
    }

    nome: str = Field(min_length=3)
    email: EmailStr
    perfil_id: int
    ativo: bool = True
    primeiro_login: bool = False
