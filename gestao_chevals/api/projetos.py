"""
Gestão Chevals - Projetos API
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from gestao_chevals.forms import FormMessages, ResourceForm
from gestao_chevals.models import ProjetoStatus, Regime
from gestao_chevals.schemas import ProjetoForm
from gestao_chevals.stores import AppState
from .auth import require_user
from .common import get_or_404, load_store, remove, save, serialize

router = APIRouter(prefix="/projetos", tags=["Projetos"])

MESSAGES = FormMessages(
    created="Projeto criado com sucesso",
    updated="Projeto atualizado com sucesso",
    failed="Erro ao salvar projeto",
)
NOT_FOUND = "Projeto não encontrado"


@router.get("")
async def list_projetos(
    status_filter: Optional[ProjetoStatus] = Query(None, alias="status"),
    state: AppState = Depends(require_user)
):
    await load_store(state.projetos)
    if status_filter is not None:
        return serialize(state.projetos.by_status(status_filter))
    return serialize(state.projetos.items)


@router.get("/{projeto_id}")
async def get_projeto(projeto_id: str, state: AppState = Depends(require_user)):
    projeto = await get_or_404(state.projetos, projeto_id, NOT_FOUND)
    return projeto.to_dict()


@router.get("/{projeto_id}/contratos")
async def list_contratos_do_projeto(projeto_id: str, state: AppState = Depends(require_user)):
    await get_or_404(state.projetos, projeto_id, NOT_FOUND)
    await load_store(state.contratos)
    return serialize(state.contratos.by_projeto(projeto_id))


@router.get("/{projeto_id}/financeiro")
async def get_financeiro_do_projeto(
    projeto_id: str,
    regime: Regime = Query(Regime.CAIXA),
    state: AppState = Depends(require_user)
):
    """Movimentações e resumo financeiro do projeto"""
    await get_or_404(state.projetos, projeto_id, NOT_FOUND)
    await load_store(state.movimentacoes)
    return {
        "movimentacoes": serialize(state.movimentacoes.by_projeto(projeto_id)),
        "resumo": state.movimentacoes.resumo(regime, projeto_id=projeto_id).model_dump(mode="json"),
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_projeto(data: Dict[str, Any] = Body(...), state: AppState = Depends(require_user)):
    form = ResourceForm(ProjetoForm, state.projetos, MESSAGES)
    return await save(form, data)


@router.put("/{projeto_id}")
async def update_projeto(
    projeto_id: str,
    data: Dict[str, Any] = Body(...),
    state: AppState = Depends(require_user)
):
    projeto = await get_or_404(state.projetos, projeto_id, NOT_FOUND)
    form = ResourceForm(ProjetoForm, state.projetos, MESSAGES)
    return await save(form, data, initial=projeto)


@router.delete("/{projeto_id}")
async def delete_projeto(projeto_id: str, state: AppState = Depends(require_user)):
    return await remove(state.projetos, projeto_id, "Projeto excluído com sucesso", NOT_FOUND)
