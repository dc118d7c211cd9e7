from .base import Record, RecordId, same_id
from .entidade import Entidade, TipoEntidade
from .empresa import Empresa
from .unidade import Unidade
from .projeto import Projeto, ProjetoStatus
from .contrato import Contrato, ContratoStatus
from .financeiro import (
    CategoriaFinanceira,
    MovimentacaoFinanceira,
    MovimentacaoStatus,
    Regime,
    TipoCategoria,
    TipoMovimentacao,
)
from .bilheteria import CanalVenda, TipoCanal
from .usuario import Perfil, Usuario

__all__ = [
    "Record",
    "RecordId",
    "same_id",
    "Entidade",
    "TipoEntidade",
    "Empresa",
    "Unidade",
    "Projeto",
    "ProjetoStatus",
    "Contrato",
    "ContratoStatus",
    "CategoriaFinanceira",
    "MovimentacaoFinanceira",
    "MovimentacaoStatus",
    "Regime",
    "TipoCategoria",
    "TipoMovimentacao",
    "CanalVenda",
    "TipoCanal",
    "Perfil",
    "Usuario",
]
