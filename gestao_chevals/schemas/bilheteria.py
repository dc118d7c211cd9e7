"""
Gestão Chevals - Bilheteria Schemas
"""
from typing import Optional

from pydantic import Field

from gestao_chevals.models import TipoCanal
from .base import FormSchema


class CanalVendaForm(FormSchema):
    required_messages = {"nome": "Nome é obrigatório", "tipo": "Tipo é obrigatório"}
    invalid_messages = {
        "tipo": "Tipo inválido",
        "taxa_servico": "Taxa deve estar entre 0 e 100",
    }

    nome: str
    tipo: TipoCanal
    responsavel: Optional[str] = None
    contato: Optional[str] = None
    taxa_servico: float = Field(default=0, ge=0, le=100)
    observacoes: Optional[str] = None
    ativo: bool = True
