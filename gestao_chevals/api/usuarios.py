"""
Gestão Chevals - Usuários API
Perfis de acesso; exclusão remove também a identidade de autenticação
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, status

from gestao_chevals.core.errors import BackendError
from gestao_chevals.forms import FormMessages, ResourceForm
from gestao_chevals.schemas import UsuarioForm
from gestao_chevals.stores import AppState
from .auth import require_user
from .common import get_or_404, load_store, save, serialize

router = APIRouter(prefix="/usuarios", tags=["Usuários"])

MESSAGES = FormMessages(
    updated="As informações do usuário foram atualizadas com sucesso",
    failed="Erro ao salvar usuário",
)
NOT_FOUND = "Usuário não encontrado"


@router.get("")
async def list_usuarios(state: AppState = Depends(require_user)):
    await load_store(state.usuarios)
    return serialize(state.usuarios.items)


@router.get("/perfis")
async def list_perfis(state: AppState = Depends(require_user)):
    """Perfis disponíveis para seleção no formulário"""
    try:
        return await state.backend.select("perfis", filters={"ativo": True}, order=[("nome", False)])
    except BackendError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )


@router.get("/{usuario_id}")
async def get_usuario(usuario_id: str, state: AppState = Depends(require_user)):
    usuario = await get_or_404(state.usuarios, usuario_id, NOT_FOUND)
    return usuario.to_dict()


@router.put("/{usuario_id}")
async def update_usuario(
    usuario_id: str,
    data: Dict[str, Any] = Body(...),
    state: AppState = Depends(require_user)
):
    usuario = await get_or_404(state.usuarios, usuario_id, NOT_FOUND)
    form = ResourceForm(UsuarioForm, state.usuarios, MESSAGES)
    return await save(form, data, initial=usuario)


@router.post("/{usuario_id}/toggle-ativo")
async def toggle_usuario(usuario_id: str, state: AppState = Depends(require_user)):
    """Ativa/desativa o usuário"""
    await get_or_404(state.usuarios, usuario_id, NOT_FOUND)
    try:
        usuario = await state.usuarios.toggle_ativo(usuario_id)
    except BackendError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=state.usuarios.error or e.message
        )

    message = "Usuário ativado" if usuario.ativo else "Usuário desativado"
    return {"message": message, "data": usuario.to_dict()}


@router.delete("/{usuario_id}")
async def delete_usuario(usuario_id: str, state: AppState = Depends(require_user)):
    """Exclui o usuário via API administrativa de autenticação"""
    await get_or_404(state.usuarios, usuario_id, NOT_FOUND)
    try:
        await state.usuarios.remove_account(usuario_id)
    except BackendError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=state.usuarios.error
        )

    return {"message": "O usuário foi removido do sistema com sucesso"}
