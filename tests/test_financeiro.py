import pytest

from gestao_chevals.models import Regime, TipoMovimentacao
from gestao_chevals.stores import CategoriaStore, MovimentacaoStore


@pytest.fixture
async def movimentacoes(backend, db):
    db.seed("movimentacoes_financeiras", [
        {
            "id": "3", "tipo": "receita", "categoria": "Locação", "descricao": "Sinal cancelado",
            "valor": 5000.0, "data_vencimento": "2025-09-01", "status": "cancelado",
        },
    ])
    store = MovimentacaoStore(backend)
    await store.fetch()
    return store


async def test_ordenacao_por_vencimento(movimentacoes):
    assert [m.id for m in movimentacoes.items] == ["2", "1", "3"]


async def test_receitas_e_despesas(movimentacoes):
    assert {m.id for m in movimentacoes.receitas} == {"1", "3"}
    assert [m.id for m in movimentacoes.despesas] == ["2"]


async def test_resumo_regime_caixa(movimentacoes):
    resumo = movimentacoes.resumo(Regime.CAIXA)

    assert resumo.receitas == 15000
    assert resumo.despesas == 0
    assert resumo.resultado == 15000
    assert resumo.margem == 100
    assert resumo.quantidade == 1


async def test_resumo_regime_competencia(movimentacoes):
    resumo = movimentacoes.resumo(Regime.COMPETENCIA)

    assert resumo.receitas == 15000
    assert resumo.despesas == 3500
    assert resumo.resultado == 11500
    assert resumo.margem == 76.67
    assert resumo.a_receber == 0
    assert resumo.a_pagar == 3500


async def test_resumo_por_projeto(movimentacoes):
    resumo = movimentacoes.resumo(Regime.COMPETENCIA, projeto_id="2")
    assert resumo.receitas == 0
    assert resumo.despesas == 3500
    assert resumo.margem == 0


async def test_categorias_por_tipo(backend, db):
    db.seed("categorias_financeiras", [{"id": "3", "nome": "Ajustes", "tipo": "ambos", "ativo": True}])
    store = CategoriaStore(backend)
    await store.fetch()

    assert [c.nome for c in store.by_tipo(TipoMovimentacao.RECEITA)] == ["Ajustes", "Locação"]
    assert [c.nome for c in store.by_tipo(TipoMovimentacao.DESPESA)] == ["Ajustes", "Decoração"]
