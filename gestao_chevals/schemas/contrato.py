"""
Gestão Chevals - Contrato Schema
"""
from datetime import date
from typing import Optional

from pydantic import Field, model_validator

from gestao_chevals.models import ContratoStatus, RecordId
from .base import FormSchema, field_error


class ContratoForm(FormSchema):
    required_messages = {
        "numero": "Número do contrato é obrigatório",
        "nome_evento": "Nome do evento é obrigatório",
    }
    invalid_messages = {
        "valor_locacao": "Valor deve ser um número positivo",
        "valor_servicos": "Valor deve ser um número positivo",
        "valor_caucao": "Valor deve ser um número positivo",
        "status": "Status inválido",
    }

    numero: str
    projeto_id: Optional[RecordId] = None
    entidade_id: Optional[RecordId] = None
    unidade_id: Optional[RecordId] = None
    espaco_id: Optional[RecordId] = None

    nome_evento: str
    tipo_evento: Optional[str] = None
    perfil_evento: Optional[str] = None

    data_assinatura: Optional[date] = None
    inicio_montagem: Optional[date] = None
    fim_montagem: Optional[date] = None
    inicio_realizacao: Optional[date] = None
    fim_realizacao: Optional[date] = None
    inicio_desmontagem: Optional[date] = None
    fim_desmontagem: Optional[date] = None

    num_diarias: int = Field(default=0, ge=0)
    num_lint: int = Field(default=0, ge=0)
    num_apresentacoes: int = Field(default=0, ge=0)
    publico_estimado: Optional[int] = Field(default=None, ge=0)

    valor_locacao: float = Field(default=0, ge=0)
    valor_servicos: float = Field(default=0, ge=0)
    valor_caucao: float = Field(default=0, ge=0)
    valor_total: float = 0

    status: ContratoStatus = ContratoStatus.RASCUNHO
    observacoes: Optional[str] = None
    clausulas_especiais: Optional[str] = None

    @model_validator(mode="after")
    def calcular_total(self):
        if self.inicio_realizacao and self.fim_realizacao and self.fim_realizacao < self.inicio_realizacao:
            raise field_error("fim_realizacao", "Fim da realização deve ser maior ou igual ao início")
        self.valor_total = self.valor_locacao + self.valor_servicos
        return self
