"""
Gestão Chevals - Bilheteria Models
Canais de venda de ingressos
"""
from typing import Optional
import enum

from .base import Record


class TipoCanal(str, enum.Enum):
    PRESENCIAL = "presencial"
    ONLINE = "online"
    TELEFONE = "telefone"
    TERCEIRO = "terceiro"
    CORTESIA = "cortesia"


class CanalVenda(Record):
    nome: str
    tipo: TipoCanal
    responsavel: Optional[str] = None
    contato: Optional[str] = None
    # percentual
    taxa_servico: float = 0
    observacoes: Optional[str] = None
    ativo: bool = True
