"""
Gestão Chevals - Contrato Model
Contrato de locação de espaço para um evento
"""
from datetime import date
from typing import Optional
import enum

from .base import Record, RecordId


class ContratoStatus(str, enum.Enum):
    """Status do contrato"""
    RASCUNHO = "rascunho"
    ATIVO = "ativo"
    CONCLUIDO = "concluido"
    CANCELADO = "cancelado"


class Contrato(Record):
    numero: str

    # Relações
    projeto_id: Optional[RecordId] = None
    entidade_id: Optional[RecordId] = None
    unidade_id: Optional[RecordId] = None
    espaco_id: Optional[RecordId] = None

    # Evento
    nome_evento: str
    tipo_evento: Optional[str] = None
    perfil_evento: Optional[str] = None

    # Períodos
    data_assinatura: Optional[date] = None
    inicio_montagem: Optional[date] = None
    fim_montagem: Optional[date] = None
    inicio_realizacao: Optional[date] = None
    fim_realizacao: Optional[date] = None
    inicio_desmontagem: Optional[date] = None
    fim_desmontagem: Optional[date] = None

    # Métricas
    num_diarias: int = 0
    num_lint: int = 0
    num_apresentacoes: int = 0
    publico_estimado: Optional[int] = None

    # Valores
    valor_locacao: float = 0
    valor_servicos: float = 0
    valor_caucao: float = 0
    valor_total: float = 0

    status: ContratoStatus = ContratoStatus.RASCUNHO
    observacoes: Optional[str] = None
    clausulas_especiais: Optional[str] = None
    arquivo_url: Optional[str] = None
