"""
Gestão Chevals - Financeiro Store
Receitas, despesas, categorias e resumo por regime de apuração
"""
from typing import List, Optional

from pydantic import BaseModel

from gestao_chevals.models import (
    CategoriaFinanceira,
    MovimentacaoFinanceira,
    MovimentacaoStatus,
    RecordId,
    Regime,
    TipoMovimentacao,
    same_id,
)
from .base import ResourceStore


class ResumoFinanceiro(BaseModel):
    """Totais apurados sobre as movimentações carregadas"""
    regime: Regime
    receitas: float = 0
    despesas: float = 0
    resultado: float = 0
    # percentual do resultado sobre as receitas
    margem: float = 0
    a_receber: float = 0
    a_pagar: float = 0
    quantidade: int = 0


def _conta_no_regime(mov: MovimentacaoFinanceira, regime: Regime) -> bool:
    if regime == Regime.CAIXA:
        return mov.status == MovimentacaoStatus.PAGO and mov.data_pagamento is not None
    return mov.status != MovimentacaoStatus.CANCELADO


class MovimentacaoStore(ResourceStore[MovimentacaoFinanceira]):
    table = "movimentacoes_financeiras"
    model = MovimentacaoFinanceira
    order_by = "data_vencimento"
    label = "movimentação"
    label_plural = "movimentações"

    @property
    def receitas(self) -> List[MovimentacaoFinanceira]:
        return [m for m in self.items if m.tipo == TipoMovimentacao.RECEITA]

    @property
    def despesas(self) -> List[MovimentacaoFinanceira]:
        return [m for m in self.items if m.tipo == TipoMovimentacao.DESPESA]

    def by_projeto(self, projeto_id: RecordId) -> List[MovimentacaoFinanceira]:
        return [m for m in self.items if same_id(m.projeto_id, projeto_id)]

    def resumo(self, regime: Regime = Regime.CAIXA, projeto_id: Optional[RecordId] = None) -> ResumoFinanceiro:
        """
        Resumo financeiro.

        caixa: apenas movimentações pagas com data de pagamento.
        competencia: tudo que não foi cancelado, pela data de vencimento.
        """
        movimentacoes = self.by_projeto(projeto_id) if projeto_id is not None else self.items
        considerados = [m for m in movimentacoes if _conta_no_regime(m, regime)]

        receitas = sum(m.valor for m in considerados if m.tipo == TipoMovimentacao.RECEITA)
        despesas = sum(m.valor for m in considerados if m.tipo == TipoMovimentacao.DESPESA)
        resultado = receitas - despesas
        pendentes = [m for m in movimentacoes if m.status == MovimentacaoStatus.PENDENTE]

        return ResumoFinanceiro(
            regime=regime,
            receitas=receitas,
            despesas=despesas,
            resultado=resultado,
            margem=round(resultado / receitas * 100, 2) if receitas else 0,
            a_receber=sum(m.valor for m in pendentes if m.tipo == TipoMovimentacao.RECEITA),
            a_pagar=sum(m.valor for m in pendentes if m.tipo == TipoMovimentacao.DESPESA),
            quantidade=len(considerados),
        )


class CategoriaStore(ResourceStore[CategoriaFinanceira]):
    table = "categorias_financeiras"
    model = CategoriaFinanceira
    order_by = "nome"
    descending = False
    label = "categoria"
    label_plural = "categorias"

    def by_tipo(self, tipo: TipoMovimentacao) -> List[CategoriaFinanceira]:
        """Categorias aplicáveis a receitas ou despesas (inclui as de tipo 'ambos')"""
        return [c for c in self.items if c.aceita(tipo)]
