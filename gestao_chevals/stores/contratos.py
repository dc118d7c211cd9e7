"""
Gestão Chevals - Contratos Store
"""
from typing import List

from gestao_chevals.models import Contrato, RecordId, same_id
from .base import ResourceStore


class ContratoStore(ResourceStore[Contrato]):
    table = "contratos"
    model = Contrato
    label = "contrato"
    label_plural = "contratos"

    def by_projeto(self, projeto_id: RecordId) -> List[Contrato]:
        return [c for c in self.items if same_id(c.projeto_id, projeto_id)]
