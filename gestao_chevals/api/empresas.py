"""
Gestão Chevals - Empresas API
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from gestao_chevals.forms import FormMessages, ResourceForm
from gestao_chevals.schemas import EmpresaForm
from gestao_chevals.stores import AppState
from .auth import require_user
from .common import get_or_404, load_store, remove, save, serialize

router = APIRouter(prefix="/empresas", tags=["Empresas"])

MESSAGES = FormMessages(
    created="Empresa criada com sucesso",
    updated="Empresa atualizada com sucesso",
    failed="Erro ao salvar empresa",
)
NOT_FOUND = "Empresa não encontrada"


@router.get("")
async def list_empresas(state: AppState = Depends(require_user)):
    await load_store(state.empresas)
    return serialize(state.empresas.items)


@router.get("/{empresa_id}")
async def get_empresa(empresa_id: str, state: AppState = Depends(require_user)):
    empresa = await get_or_404(state.empresas, empresa_id, NOT_FOUND)
    return empresa.to_dict()


@router.get("/{empresa_id}/unidades")
async def list_unidades_da_empresa(empresa_id: str, state: AppState = Depends(require_user)):
    """Espaços ativos de uma empresa"""
    await get_or_404(state.empresas, empresa_id, NOT_FOUND)
    await load_store(state.unidades)
    return serialize(state.unidades.by_empresa(empresa_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_empresa(data: Dict[str, Any] = Body(...), state: AppState = Depends(require_user)):
    form = ResourceForm(EmpresaForm, state.empresas, MESSAGES)
    return await save(form, data)


@router.put("/{empresa_id}")
async def update_empresa(
    empresa_id: str,
    data: Dict[str, Any] = Body(...),
    state: AppState = Depends(require_user)
):
    empresa = await get_or_404(state.empresas, empresa_id, NOT_FOUND)
    form = ResourceForm(EmpresaForm, state.empresas, MESSAGES)
    return await save(form, data, initial=empresa)


@router.delete("/{empresa_id}")
async def delete_empresa(empresa_id: str, state: AppState = Depends(require_user)):
    return await remove(state.empresas, empresa_id, "Empresa excluída com sucesso", NOT_FOUND)
