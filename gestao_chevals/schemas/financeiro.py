"""
Gestão Chevals - Financeiro Schemas
"""
from datetime import date
from typing import Optional

from pydantic import Field, model_validator

from gestao_chevals.models import (
    MovimentacaoStatus,
    RecordId,
    TipoCategoria,
    TipoMovimentacao,
)
from .base import FormSchema, field_error


class MovimentacaoForm(FormSchema):
    required_messages = {
        "tipo": "Tipo é obrigatório",
        "descricao": "Descrição é obrigatória",
        "categoria": "Categoria é obrigatória",
        "valor": "Valor é obrigatório",
        "data_vencimento": "Data de vencimento é obrigatória",
    }
    invalid_messages = {
        "tipo": "Tipo inválido",
        "valor": "Valor deve ser maior que zero",
        "data_vencimento": "Data inválida",
        "data_pagamento": "Data inválida",
        "status": "Status inválido",
    }

    tipo: TipoMovimentacao
    descricao: str
    categoria: str
    valor: float = Field(gt=0)
    data_vencimento: date
    data_pagamento: Optional[date] = None
    status: MovimentacaoStatus = MovimentacaoStatus.PENDENTE
    projeto_id: Optional[RecordId] = None
    observacoes: Optional[str] = None

    @model_validator(mode="after")
    def pagamento(self):
        if self.status == MovimentacaoStatus.PAGO and self.data_pagamento is None:
            raise field_error("data_pagamento", "Informe a data de pagamento")
        return self


class CategoriaForm(FormSchema):
    required_messages = {"nome": "Nome é obrigatório", "tipo": "Tipo é obrigatório"}
    invalid_messages = {"tipo": "Tipo inválido", "cor": "Cor deve estar no formato #RRGGBB"}

    nome: str
    tipo: TipoCategoria
    descricao: Optional[str] = None
    cor: Optional[str] = Field(default=None, pattern=r"^#[0-9a-fA-F]{6}$")
    ativo: bool = True
