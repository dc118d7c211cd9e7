"""
Gestão Chevals - Unidades Store
Espaços locáveis; exclusão apenas marca a unidade como inativa
"""
from typing import List

from gestao_chevals.models import RecordId, Unidade, same_id
from .base import ResourceStore


class UnidadeStore(ResourceStore[Unidade]):
    table = "unidades"
    model = Unidade
    order_by = "nome"
    descending = False
    active_only = True
    soft_delete = True
    label = "unidade"
    label_plural = "unidades"

    def by_empresa(self, empresa_id: RecordId) -> List[Unidade]:
        return [u for u in self.items if same_id(u.empresa_id, empresa_id)]
