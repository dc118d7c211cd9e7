"""
Gestão Chevals - Bilheteria API
Canais de venda de ingressos
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Query, status

from gestao_chevals.forms import FormMessages, ResourceForm
from gestao_chevals.schemas import CanalVendaForm
from gestao_chevals.stores import AppState
from .auth import require_user
from .common import get_or_404, load_store, remove, save, serialize

router = APIRouter(prefix="/bilheteria", tags=["Bilheteria"])

MESSAGES = FormMessages(
    created="Canal criado com sucesso",
    updated="Canal atualizado com sucesso",
    failed="Erro ao salvar canal",
)
NOT_FOUND = "Canal não encontrado"


@router.get("/canais")
async def list_canais(
    ativos: bool = Query(False),
    state: AppState = Depends(require_user)
):
    await load_store(state.canais)
    return serialize(state.canais.ativos if ativos else state.canais.items)


@router.get("/canais/{canal_id}")
async def get_canal(canal_id: str, state: AppState = Depends(require_user)):
    canal = await get_or_404(state.canais, canal_id, NOT_FOUND)
    return canal.to_dict()


@router.post("/canais", status_code=status.HTTP_201_CREATED)
async def create_canal(data: Dict[str, Any] = Body(...), state: AppState = Depends(require_user)):
    form = ResourceForm(CanalVendaForm, state.canais, MESSAGES)
    return await save(form, data)


@router.put("/canais/{canal_id}")
async def update_canal(
    canal_id: str,
    data: Dict[str, Any] = Body(...),
    state: AppState = Depends(require_user)
):
    canal = await get_or_404(state.canais, canal_id, NOT_FOUND)
    form = ResourceForm(CanalVendaForm, state.canais, MESSAGES)
    return await save(form, data, initial=canal)


@router.delete("/canais/{canal_id}")
async def delete_canal(canal_id: str, state: AppState = Depends(require_user)):
    return await remove(state.canais, canal_id, "Canal excluído com sucesso", NOT_FOUND)
