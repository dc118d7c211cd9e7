"""
Gestão Chevals - Entidades API
Clientes, parceiros e fornecedores
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from gestao_chevals.forms import FormMessages, ResourceForm
from gestao_chevals.models import TipoEntidade
from gestao_chevals.schemas import EntidadeForm
from gestao_chevals.stores import AppState
from .auth import require_user
from .common import get_or_404, load_store, remove, save, serialize

router = APIRouter(prefix="/entidades", tags=["Entidades"])

MESSAGES = FormMessages(
    created="Entidade criada com sucesso",
    updated="Entidade atualizada com sucesso",
    failed="Erro ao salvar entidade",
)
NOT_FOUND = "Entidade não encontrada"


@router.get("")
async def list_entidades(
    tipo: Optional[TipoEntidade] = Query(None),
    state: AppState = Depends(require_user)
):
    """Lista entidades ativas, opcionalmente por tipo"""
    await load_store(state.entidades)
    if tipo is not None:
        return serialize(state.entidades.by_tipo(tipo))
    return serialize(state.entidades.items)


@router.get("/{entidade_id}")
async def get_entidade(entidade_id: str, state: AppState = Depends(require_user)):
    entidade = await get_or_404(state.entidades, entidade_id, NOT_FOUND)
    return {**entidade.to_dict(), "tipos": entidade.tipos}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_entidade(data: Dict[str, Any] = Body(...), state: AppState = Depends(require_user)):
    form = ResourceForm(EntidadeForm, state.entidades, MESSAGES)
    return await save(form, data)


@router.put("/{entidade_id}")
async def update_entidade(
    entidade_id: str,
    data: Dict[str, Any] = Body(...),
    state: AppState = Depends(require_user)
):
    entidade = await get_or_404(state.entidades, entidade_id, NOT_FOUND)
    form = ResourceForm(EntidadeForm, state.entidades, MESSAGES)
    return await save(form, data, initial=entidade)


@router.delete("/{entidade_id}")
async def delete_entidade(entidade_id: str, state: AppState = Depends(require_user)):
    """Desativa a entidade (soft delete)"""
    return await remove(state.entidades, entidade_id, "Entidade excluída com sucesso", NOT_FOUND)
