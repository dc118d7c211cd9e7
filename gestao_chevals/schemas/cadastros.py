"""
Gestão Chevals - Cadastros Schemas
Formulários de entidades, empresas, unidades e projetos
"""
from datetime import date
from typing import Optional

from pydantic import EmailStr, Field, field_validator, model_validator

from gestao_chevals.models import ProjetoStatus, RecordId
from .base import FormSchema, field_error


class EntidadeForm(FormSchema):
    required_messages = {"nome": "Nome é obrigatório"}
    invalid_messages = {"email": "E-mail inválido"}

    nome: str
    e_cliente: bool = False
    e_parceiro: bool = False
    e_fornecedor: bool = False
    documento: Optional[str] = None
    email: Optional[EmailStr] = None
    telefone: Optional[str] = None
    endereco: Optional[str] = None
    ativo: bool = True

    @model_validator(mode="after")
    def pelo_menos_um_tipo(self):
        if not (self.e_cliente or self.e_parceiro or self.e_fornecedor):
            raise field_error("tipos", "Selecione pelo menos um tipo")
        return self


class EmpresaForm(FormSchema):
    required_messages = {"nome": "Nome é obrigatório"}
    invalid_messages = {"email": "E-mail inválido"}

    nome: str
    razao_social: Optional[str] = None
    cnpj: Optional[str] = None
    email: Optional[EmailStr] = None
    telefone: Optional[str] = None
    endereco: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = None
    cep: Optional[str] = None
    responsavel: Optional[str] = None
    observacoes: Optional[str] = None
    ativo: bool = True

    @field_validator("estado")
    @classmethod
    def uf(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) != 2:
            raise field_error("estado", "Estado deve ter 2 caracteres")
        return v.upper() if v else v


class UnidadeForm(FormSchema):
    required_messages = {"nome": "Nome é obrigatório"}
    invalid_messages = {
        "capacidade": "Capacidade deve ser um número inteiro positivo",
        "valor_base": "Valor deve ser um número positivo",
    }

    nome: str
    descricao: Optional[str] = None
    localizacao: Optional[str] = None
    capacidade: Optional[int] = Field(default=None, ge=0)
    valor_base: Optional[float] = Field(default=None, ge=0)
    empresa_id: Optional[RecordId] = None
    ativo: bool = True


class ProjetoForm(FormSchema):
    required_messages = {"nome": "Nome é obrigatório"}
    invalid_messages = {
        "data_inicio": "Data inválida",
        "data_fim": "Data inválida",
        "status": "Status inválido",
        "orcamento": "Orçamento deve ser um número positivo",
    }

    nome: str
    tipo: Optional[str] = None
    descricao: Optional[str] = None
    local: Optional[str] = None
    responsavel: Optional[str] = None
    entidade_id: Optional[RecordId] = None
    unidade_id: Optional[RecordId] = None
    espaco_id: Optional[RecordId] = None
    contrato_id: Optional[RecordId] = None
    data_inicio: Optional[date] = None
    data_fim: Optional[date] = None
    status: ProjetoStatus = ProjetoStatus.PLANEJAMENTO
    orcamento: Optional[float] = Field(default=None, ge=0)
    observacoes: Optional[str] = None

    @model_validator(mode="after")
    def periodo(self):
        if self.data_inicio and self.data_fim and self.data_fim < self.data_inicio:
            raise field_error("data_fim", "Data de término deve ser maior ou igual à data de início")
        return self
