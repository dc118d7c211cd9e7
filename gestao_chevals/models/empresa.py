"""
Gestão Chevals - Empresa Model
Empresas donas das unidades/espaços
"""
from typing import Optional

from .base import Record


class Empresa(Record):
    nome: str
    razao_social: Optional[str] = None
    cnpj: Optional[str] = None
    email: Optional[str] = None
    telefone: Optional[str] = None
    endereco: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = None
    cep: Optional[str] = None
    responsavel: Optional[str] = None
    observacoes: Optional[str] = None
    ativo: bool = True
