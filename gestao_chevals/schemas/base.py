"""
Gestão Chevals - Form Schema Base
Limpeza de entrada e mensagens de erro por campo
"""
from typing import Any, ClassVar, Dict

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from pydantic_core import PydanticCustomError

FieldErrors = Dict[str, str]

REQUIRED_MESSAGE = "Campo obrigatório"
INVALID_MESSAGE = "Valor inválido"


def field_error(field: str, message: str) -> PydanticCustomError:
    """Erro de validação associado a um campo específico do formulário"""
    return PydanticCustomError("campo_invalido", "{message}", {"field": field, "message": message})


def _clean(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class FormSchema(BaseModel):
    """Base dos formulários: strings aparadas e campos vazios enviados como null"""
    model_config = ConfigDict(extra="ignore")

    required_messages: ClassVar[Dict[str, str]] = {}
    invalid_messages: ClassVar[Dict[str, str]] = {}

    @model_validator(mode="before")
    @classmethod
    def limpar_campos(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            value = _clean(value)
            field = cls.model_fields.get(key)
            # vazio em campo com default não nulo (ex.: booleanos) volta ao default
            if value is None and field is not None and not field.is_required() and field.default is not None:
                continue
            cleaned[key] = value
        return cleaned

    @classmethod
    def error_map(cls, exc: ValidationError) -> FieldErrors:
        """Converte ValidationError em {campo: mensagem}, primeira mensagem por campo"""
        errors: FieldErrors = {}
        for err in exc.errors():
            ctx = err.get("ctx") or {}
            if err["type"] == "campo_invalido":
                field = ctx.get("field") or "__root__"
                message = err["msg"]
            else:
                field = str(err["loc"][0]) if err["loc"] else "__root__"
                if err["type"] == "missing" or err.get("input") is None:
                    message = cls.required_messages.get(field, REQUIRED_MESSAGE)
                else:
                    message = cls.invalid_messages.get(field, INVALID_MESSAGE)
            errors.setdefault(field, message)
        return errors
