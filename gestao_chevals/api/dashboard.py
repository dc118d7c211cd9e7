"""
Gestão Chevals - Dashboard API
Contadores e resumo financeiro derivados das stores
"""
import asyncio

from fastapi import APIRouter, Depends, Query

from gestao_chevals.models import ContratoStatus, ProjetoStatus, Regime, TipoEntidade
from gestao_chevals.stores import AppState
from .auth import require_user
from .common import load_store

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("")
async def get_dashboard(
    regime: Regime = Query(Regime.CAIXA),
    state: AppState = Depends(require_user)
):
    """Visão geral do sistema"""
    results = await asyncio.gather(
        load_store(state.entidades),
        load_store(state.unidades),
        load_store(state.projetos),
        load_store(state.contratos),
        load_store(state.movimentacoes),
        load_store(state.canais),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result

    projetos = state.projetos
    contratos = state.contratos.items

    return {
        "entidades": {
            "total": len(state.entidades.items),
            "clientes": len(state.entidades.by_tipo(TipoEntidade.CLIENTE)),
            "parceiros": len(state.entidades.by_tipo(TipoEntidade.PARCEIRO)),
            "fornecedores": len(state.entidades.by_tipo(TipoEntidade.FORNECEDOR)),
        },
        "unidades": len(state.unidades.items),
        "projetos": {
            "total": len(projetos.items),
            **{s.value: len(projetos.by_status(s)) for s in ProjetoStatus},
        },
        "contratos": {
            "total": len(contratos),
            "ativos": len([c for c in contratos if c.status == ContratoStatus.ATIVO]),
            "valor_total": sum(c.valor_total for c in contratos if c.status != ContratoStatus.CANCELADO),
        },
        "canais_ativos": len(state.canais.ativos),
        "financeiro": state.movimentacoes.resumo(regime).model_dump(mode="json"),
    }
