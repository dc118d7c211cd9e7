"""
Gestão Chevals - Resource Store
Lista em memória + loading + erro, reconciliada a cada chamada remota.
Cada entidade de negócio declara sua tabela, ordenação e política de exclusão.
"""
import logging
from typing import Any, Callable, ClassVar, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError
from pydantic_core import to_jsonable_python

from gestao_chevals.backend import Backend
from gestao_chevals.backend.base import Filters, Order, Row
from gestao_chevals.core.errors import BackendError, error_message
from gestao_chevals.models import Record, RecordId, same_id

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)
Payload = Union[BaseModel, Dict[str, Any]]
Listener = Callable[["ResourceStore"], None]


def _order_key(column: str):
    def key(record: Record):
        value = getattr(record, column, None)
        if isinstance(value, str):
            value = value.casefold()
        return (value is None, value if value is not None else 0)
    return key


class ResourceStore(Generic[RecordT]):
    """Store genérica de um recurso remoto"""

    table: ClassVar[str]
    model: ClassVar[Type[Record]]
    order_by: ClassVar[str] = "created_at"
    descending: ClassVar[bool] = True
    active_only: ClassVar[bool] = False
    soft_delete: ClassVar[bool] = False
    label: ClassVar[str] = "registro"
    label_plural: ClassVar[str] = "registros"

    def __init__(self, backend: Backend):
        self.backend = backend
        self.items: List[RecordT] = []
        self.loading = False
        self.error: Optional[str] = None
        self._pending = 0
        self._fetch_generation = 0
        self._listeners: List[Listener] = []

    # Observadores

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registra callback chamado após cada mudança de `items`"""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # Estado

    def _begin(self) -> None:
        self._pending += 1
        self.loading = True
        self.error = None

    def _end(self) -> None:
        self._pending -= 1
        self.loading = self._pending > 0

    def _fail(self, exc: BackendError, fallback: str) -> None:
        self.error = error_message(exc, fallback)
        logger.error(f"[{self.table}] {fallback}: {self.error}")

    def _parse(self, row: Row) -> RecordT:
        """Linha remota fora do formato do modelo vira BackendError"""
        try:
            return self.model.model_validate(row)
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise BackendError(f"Resposta inválida do servidor ({fields or self.label})") from e

    @staticmethod
    def _serialize(payload: Payload, partial: bool) -> Row:
        if isinstance(payload, BaseModel):
            return payload.model_dump(mode="json", exclude_unset=partial)
        return to_jsonable_python(dict(payload))

    def _fetch_filters(self) -> Filters:
        return {"ativo": True} if self.active_only else {}

    def _order(self) -> Order:
        return [(self.order_by, self.descending)]

    # Operações

    async def fetch(self) -> List[RecordT]:
        """Recarrega a lista; respostas de buscas superadas são descartadas"""
        self._fetch_generation += 1
        generation = self._fetch_generation
        self._begin()
        try:
            rows = await self.backend.select(
                self.table,
                filters=self._fetch_filters(),
                order=self._order(),
            )
            if generation == self._fetch_generation:
                self.items = [self._parse(row) for row in rows or []]
                self._notify()
            else:
                logger.debug(f"[{self.table}] resposta de busca antiga descartada")
        except BackendError as e:
            self._fail(e, f"Erro ao carregar {self.label_plural}")
        finally:
            self._end()
        return self.items

    async def create(self, data: Payload) -> RecordT:
        self._begin()
        try:
            row = await self.backend.insert(self.table, self._serialize(data, partial=False))
            record = self._parse(row)
        except BackendError as e:
            self._fail(e, f"Erro ao criar {self.label}")
            raise
        finally:
            self._end()

        if self.descending:
            self.items = [record, *self.items]
        else:
            self.items = sorted([*self.items, record], key=_order_key(self.order_by))
        self._notify()
        return record

    async def update(self, record_id: RecordId, patch: Payload) -> RecordT:
        changes = self._serialize(patch, partial=True)
        self._begin()
        try:
            rows = await self.backend.update(self.table, {"id": record_id}, changes)
            if not rows:
                raise BackendError("Registro não encontrado")
            existing = self.get_by_id(record_id)
            if existing is None:
                return self._parse(rows[0])
            record = self._parse({**existing.model_dump(), **rows[0]})
        except BackendError as e:
            self._fail(e, f"Erro ao atualizar {self.label}")
            raise
        finally:
            self._end()

        self.items = [record if same_id(r.id, record_id) else r for r in self.items]
        self._notify()
        return record

    async def delete(self, record_id: RecordId) -> None:
        self._begin()
        try:
            if self.soft_delete:
                await self.backend.update(self.table, {"id": record_id}, {"ativo": False})
            else:
                await self.backend.delete(self.table, {"id": record_id})
        except BackendError as e:
            self._fail(e, f"Erro ao excluir {self.label}")
            raise
        finally:
            self._end()

        self.items = [r for r in self.items if not same_id(r.id, record_id)]
        self._notify()

    def get_by_id(self, record_id: RecordId) -> Optional[RecordT]:
        return next((r for r in self.items if same_id(r.id, record_id)), None)

    async def find(self, record_id: RecordId) -> Optional[RecordT]:
        """Leitura remota direta por id, inclusive de registros inativos"""
        try:
            rows = await self.backend.select(self.table, filters={"id": record_id})
            return self._parse(rows[0]) if rows else None
        except BackendError as e:
            self._fail(e, f"Erro ao carregar {self.label}")
            raise
