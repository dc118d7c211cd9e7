"""
Gestão Chevals - Contratos API
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from gestao_chevals.forms import FormMessages, ResourceForm
from gestao_chevals.schemas import ContratoForm
from gestao_chevals.stores import AppState
from .auth import require_user
from .common import get_or_404, load_store, remove, save, serialize

router = APIRouter(prefix="/contratos", tags=["Contratos"])

MESSAGES = FormMessages(
    created="Contrato criado com sucesso",
    updated="Contrato atualizado com sucesso",
    failed="Erro ao salvar contrato",
)
NOT_FOUND = "Contrato não encontrado"


@router.get("")
async def list_contratos(
    projeto_id: Optional[str] = Query(None),
    state: AppState = Depends(require_user)
):
    await load_store(state.contratos)
    if projeto_id:
        return serialize(state.contratos.by_projeto(projeto_id))
    return serialize(state.contratos.items)


@router.get("/{contrato_id}")
async def get_contrato(contrato_id: str, state: AppState = Depends(require_user)):
    contrato = await get_or_404(state.contratos, contrato_id, NOT_FOUND)
    return contrato.to_dict()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_contrato(data: Dict[str, Any] = Body(...), state: AppState = Depends(require_user)):
    """Cria contrato; valor_total = locação + serviços"""
    form = ResourceForm(ContratoForm, state.contratos, MESSAGES)
    return await save(form, data)


@router.put("/{contrato_id}")
async def update_contrato(
    contrato_id: str,
    data: Dict[str, Any] = Body(...),
    state: AppState = Depends(require_user)
):
    contrato = await get_or_404(state.contratos, contrato_id, NOT_FOUND)
    form = ResourceForm(ContratoForm, state.contratos, MESSAGES)
    return await save(form, data, initial=contrato)


@router.delete("/{contrato_id}")
async def delete_contrato(contrato_id: str, state: AppState = Depends(require_user)):
    return await remove(state.contratos, contrato_id, "Contrato excluído com sucesso", NOT_FOUND)
