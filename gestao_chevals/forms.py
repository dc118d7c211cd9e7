"""
Gestão Chevals - Forms
Validação síncrona + exatamente uma mutação na store por envio válido
"""
import logging
from typing import Any, Callable, Dict, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from gestao_chevals.core.errors import BackendError, error_message
from gestao_chevals.models import Record
from gestao_chevals.schemas.base import FieldErrors, FormSchema
from gestao_chevals.stores.base import ResourceStore

logger = logging.getLogger(__name__)


class FormResult(BaseModel):
    success: bool
    message: str
    errors: FieldErrors = {}
    record: Optional[Record] = None


class FormMessages(BaseModel):
    """Textos das notificações exibidas após o envio"""
    created: str = "Registro criado com sucesso"
    updated: str = "Registro atualizado com sucesso"
    invalid: str = "Verifique os campos do formulário"
    failed: str = "Erro ao salvar registro"


class ResourceForm:
    def __init__(
        self,
        schema: Type[FormSchema],
        store: ResourceStore,
        messages: Optional[FormMessages] = None,
    ):
        self.schema = schema
        self.store = store
        self.messages = messages or FormMessages()

    def _initial_values(self, initial: Record) -> Dict[str, Any]:
        return {k: v for k, v in initial.to_dict().items() if k in self.schema.model_fields}

    def validate(
        self, data: Dict[str, Any], initial: Optional[Record] = None
    ) -> Tuple[Optional[FormSchema], FieldErrors]:
        values = dict(data)
        if initial is not None:
            values = {**self._initial_values(initial), **values}
        try:
            return self.schema.model_validate(values), {}
        except ValidationError as e:
            return None, self.schema.error_map(e)

    async def submit(
        self,
        data: Dict[str, Any],
        initial: Optional[Record] = None,
        on_success: Optional[Callable[[Record], Any]] = None,
    ) -> FormResult:
        """Cria (sem `initial`) ou atualiza (com `initial`) o registro"""
        payload, errors = self.validate(data, initial)
        if payload is None:
            logger.debug(f"Formulário {self.schema.__name__} inválido: {sorted(errors)}")
            return FormResult(success=False, message=self.messages.invalid, errors=errors)

        try:
            if initial is None:
                record = await self.store.create(payload)
                message = self.messages.created
            else:
                before = self._initial_values(initial)
                after = payload.model_dump(mode="json")
                patch = {k: v for k, v in after.items() if k in data or before.get(k) != v}
                record = await self.store.update(initial.id, patch)
                message = self.messages.updated
        except BackendError as e:
            return FormResult(success=False, message=error_message(e, self.messages.failed))

        if on_success is not None:
            on_success(record)
        return FormResult(success=True, message=message, record=record)
