"""
Gestão Chevals - Unidade Model
Unidades/espaços locáveis de uma empresa
"""
from typing import Optional

from .base import Record, RecordId


class Unidade(Record):
    nome: str
    descricao: Optional[str] = None
    localizacao: Optional[str] = None
    capacidade: Optional[int] = None
    valor_base: Optional[float] = None
    empresa_id: Optional[RecordId] = None
    ativo: bool = True
