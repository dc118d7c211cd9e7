"""
Gestão Chevals - Financeiro Models
Movimentações (receitas e despesas) e categorias
"""
from datetime import date
from typing import Optional
import enum

from .base import Record, RecordId


class TipoMovimentacao(str, enum.Enum):
    RECEITA = "receita"
    DESPESA = "despesa"


class MovimentacaoStatus(str, enum.Enum):
    PENDENTE = "pendente"
    PAGO = "pago"
    CANCELADO = "cancelado"


class TipoCategoria(str, enum.Enum):
    RECEITA = "receita"
    DESPESA = "despesa"
    AMBOS = "ambos"


class Regime(str, enum.Enum):
    """Regime de apuração do resumo financeiro"""
    CAIXA = "caixa"
    COMPETENCIA = "competencia"


class MovimentacaoFinanceira(Record):
    projeto_id: Optional[RecordId] = None
    tipo: TipoMovimentacao
    categoria: Optional[str] = None
    descricao: str
    valor: float
    data_vencimento: Optional[date] = None
    data_pagamento: Optional[date] = None
    status: MovimentacaoStatus = MovimentacaoStatus.PENDENTE
    observacoes: Optional[str] = None


class CategoriaFinanceira(Record):
    nome: str
    tipo: TipoCategoria
    descricao: Optional[str] = None
    cor: Optional[str] = None
    ativo: bool = True

    def aceita(self, tipo: TipoMovimentacao) -> bool:
        return self.tipo == TipoCategoria.AMBOS or self.tipo.value == tipo.value
