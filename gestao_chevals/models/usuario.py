"""
Gestão Chevals - Usuario Model
Perfil da aplicação (tabela users), distinto da identidade de autenticação
"""
from typing import Optional

from .base import Record


class Perfil(Record):
    nome: str
    descricao: Optional[str] = None
    ativo: bool = True


class Usuario(Record):
    email: str
    nome: Optional[str] = None
    perfil_id: Optional[int] = None
    ativo: bool = True
    # senha padrão ainda não trocada
    primeiro_login: bool = False
