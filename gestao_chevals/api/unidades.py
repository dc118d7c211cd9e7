"""
Gestão Chevals - Unidades API
Espaços locáveis
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from gestao_chevals.forms import FormMessages, ResourceForm
from gestao_chevals.schemas import UnidadeForm
from gestao_chevals.stores import AppState
from .auth import require_user
from .common import get_or_404, load_store, remove, save, serialize

router = APIRouter(prefix="/unidades", tags=["Unidades"])

MESSAGES = FormMessages(
    created="Unidade criada com sucesso",
    updated="Unidade atualizada com sucesso",
    failed="Erro ao salvar unidade",
)
NOT_FOUND = "Unidade não encontrada"


@router.get("")
async def list_unidades(
    empresa_id: Optional[str] = Query(None),
    state: AppState = Depends(require_user)
):
    await load_store(state.unidades)
    if empresa_id:
        return serialize(state.unidades.by_empresa(empresa_id))
    return serialize(state.unidades.items)


@router.get("/{unidade_id}")
async def get_unidade(unidade_id: str, state: AppState = Depends(require_user)):
    unidade = await get_or_404(state.unidades, unidade_id, NOT_FOUND)
    return unidade.to_dict()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_unidade(data: Dict[str, Any] = Body(...), state: AppState = Depends(require_user)):
    form = ResourceForm(UnidadeForm, state.unidades, MESSAGES)
    return await save(form, data)


@router.put("/{unidade_id}")
async def update_unidade(
    unidade_id: str,
    data: Dict[str, Any] = Body(...),
    state: AppState = Depends(require_user)
):
    unidade = await get_or_404(state.unidades, unidade_id, NOT_FOUND)
    form = ResourceForm(UnidadeForm, state.unidades, MESSAGES)
    return await save(form, data, initial=unidade)


@router.delete("/{unidade_id}")
async def delete_unidade(unidade_id: str, state: AppState = Depends(require_user)):
    """Desativa a unidade (soft delete)"""
    return await remove(state.unidades, unidade_id, "Unidade excluída com sucesso", NOT_FOUND)
