"""
Gestão Chevals - Financeiro API
Receitas, despesas, categorias e resumo por regime
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from gestao_chevals.forms import FormMessages, ResourceForm
from gestao_chevals.models import Regime, TipoMovimentacao, same_id
from gestao_chevals.schemas import CategoriaForm, MovimentacaoForm
from gestao_chevals.stores import AppState
from .auth import require_user
from .common import get_or_404, load_store, remove, save, serialize

router = APIRouter(prefix="/financeiro", tags=["Financeiro"])

MOVIMENTACAO_MESSAGES = FormMessages(
    created="Movimentação criada com sucesso",
    updated="Movimentação atualizada com sucesso",
    failed="Erro ao salvar movimentação",
)
CATEGORIA_MESSAGES = FormMessages(
    created="Categoria criada com sucesso",
    updated="Categoria atualizada com sucesso",
    failed="Erro ao salvar categoria",
)
MOVIMENTACAO_NOT_FOUND = "Movimentação não encontrada"
CATEGORIA_NOT_FOUND = "Categoria não encontrada"


# Movimentações

@router.get("/movimentacoes")
async def list_movimentacoes(
    tipo: Optional[TipoMovimentacao] = Query(None),
    projeto_id: Optional[str] = Query(None),
    state: AppState = Depends(require_user)
):
    store = state.movimentacoes
    await load_store(store)
    items = store.items
    if tipo == TipoMovimentacao.RECEITA:
        items = store.receitas
    elif tipo == TipoMovimentacao.DESPESA:
        items = store.despesas
    if projeto_id:
        items = [m for m in items if same_id(m.projeto_id, projeto_id)]
    return serialize(items)


@router.get("/movimentacoes/{movimentacao_id}")
async def get_movimentacao(movimentacao_id: str, state: AppState = Depends(require_user)):
    movimentacao = await get_or_404(state.movimentacoes, movimentacao_id, MOVIMENTACAO_NOT_FOUND)
    return movimentacao.to_dict()


@router.post("/movimentacoes", status_code=status.HTTP_201_CREATED)
async def create_movimentacao(data: Dict[str, Any] = Body(...), state: AppState = Depends(require_user)):
    form = ResourceForm(MovimentacaoForm, state.movimentacoes, MOVIMENTACAO_MESSAGES)
    return await save(form, data)


@router.put("/movimentacoes/{movimentacao_id}")
async def update_movimentacao(
    movimentacao_id: str,
    data: Dict[str, Any] = Body(...),
    state: AppState = Depends(require_user)
):
    movimentacao = await get_or_404(state.movimentacoes, movimentacao_id, MOVIMENTACAO_NOT_FOUND)
    form = ResourceForm(MovimentacaoForm, state.movimentacoes, MOVIMENTACAO_MESSAGES)
    return await save(form, data, initial=movimentacao)


@router.delete("/movimentacoes/{movimentacao_id}")
async def delete_movimentacao(movimentacao_id: str, state: AppState = Depends(require_user)):
    return await remove(
        state.movimentacoes, movimentacao_id,
        "Movimentação excluída com sucesso", MOVIMENTACAO_NOT_FOUND
    )


@router.get("/resumo")
async def get_resumo(
    regime: Regime = Query(Regime.CAIXA),
    projeto_id: Optional[str] = Query(None),
    state: AppState = Depends(require_user)
):
    """Totais de receitas, despesas, resultado e margem no regime escolhido"""
    await load_store(state.movimentacoes)
    return state.movimentacoes.resumo(regime, projeto_id=projeto_id).model_dump(mode="json")


# Categorias

@router.get("/categorias")
async def list_categorias(
    tipo: Optional[TipoMovimentacao] = Query(None),
    state: AppState = Depends(require_user)
):
    """Lista categorias; com `tipo`, inclui as que servem a ambos"""
    await load_store(state.categorias)
    if tipo is not None:
        return serialize(state.categorias.by_tipo(tipo))
    return serialize(state.categorias.items)


@router.post("/categorias", status_code=status.HTTP_201_CREATED)
async def create_categoria(data: Dict[str, Any] = Body(...), state: AppState = Depends(require_user)):
    form = ResourceForm(CategoriaForm, state.categorias, CATEGORIA_MESSAGES)
    return await save(form, data)


@router.put("/categorias/{categoria_id}")
async def update_categoria(
    categoria_id: str,
    data: Dict[str, Any] = Body(...),
    state: AppState = Depends(require_user)
):
    categoria = await get_or_404(state.categorias, categoria_id, CATEGORIA_NOT_FOUND)
    form = ResourceForm(CategoriaForm, state.categorias, CATEGORIA_MESSAGES)
    return await save(form, data, initial=categoria)


@router.delete("/categorias/{categoria_id}")
async def delete_categoria(categoria_id: str, state: AppState = Depends(require_user)):
    return await remove(state.categorias, categoria_id, "Categoria excluída com sucesso", CATEGORIA_NOT_FOUND)
