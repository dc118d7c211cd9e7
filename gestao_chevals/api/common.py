"""
Gestão Chevals - API helpers
Tradução do estado das stores e formulários para respostas HTTP
"""
from typing import Any, Dict, List, Optional, Type, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError

from gestao_chevals.core.errors import BackendError
from gestao_chevals.forms import ResourceForm
from gestao_chevals.models import Record, RecordId
from gestao_chevals.schemas import FormSchema
from gestao_chevals.stores import ResourceStore

SchemaT = TypeVar("SchemaT", bound=FormSchema)


def validate_or_422(schema: Type[SchemaT], data: Dict[str, Any]) -> SchemaT:
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": "Verifique os campos do formulário", "errors": schema.error_map(e)}
        )


async def load_store(store: ResourceStore) -> None:
    """Executa o fetch da store; erro registrado vira 400"""
    await store.fetch()
    if store.error:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=store.error
        )


def serialize(records: List[Record]) -> List[Dict[str, Any]]:
    return [r.to_dict() for r in records]


async def get_or_404(store: ResourceStore, record_id: RecordId, detail: str) -> Record:
    try:
        record = await store.find(record_id)
    except BackendError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=store.error
        )

    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail
        )
    return record


async def save(form: ResourceForm, data: Dict[str, Any], initial: Optional[Record] = None) -> Dict[str, Any]:
    """Envia o formulário e devolve {message, data}"""
    result = await form.submit(data, initial=initial)

    if result.errors:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": result.message, "errors": result.errors}
        )
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=result.message
        )

    return {"message": result.message, "data": result.record.to_dict()}


async def remove(store: ResourceStore, record_id: RecordId, message: str, not_found: str) -> Dict[str, Any]:
    await get_or_404(store, record_id, not_found)
    try:
        await store.delete(record_id)
    except BackendError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=store.error
        )
    return {"message": message}
