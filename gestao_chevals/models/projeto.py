"""
Gestão Chevals - Projeto Model
"""
from datetime import date
from typing import Optional
import enum

from .base import Record, RecordId


class ProjetoStatus(str, enum.Enum):
    """Status do projeto"""
    PLANEJAMENTO = "planejamento"
    APROVADO = "aprovado"
    EM_ANDAMENTO = "em_andamento"
    CONCLUIDO = "concluido"
    CANCELADO = "cancelado"


class Projeto(Record):
    nome: str
    tipo: Optional[str] = None
    descricao: Optional[str] = None
    local: Optional[str] = None
    responsavel: Optional[str] = None
    entidade_id: Optional[RecordId] = None
    unidade_id: Optional[RecordId] = None
    espaco_id: Optional[RecordId] = None
    contrato_id: Optional[RecordId] = None
    data_inicio: Optional[date] = None
    data_fim: Optional[date] = None
    status: ProjetoStatus = ProjetoStatus.PLANEJAMENTO
    orcamento: Optional[float] = None
    observacoes: Optional[str] = None
