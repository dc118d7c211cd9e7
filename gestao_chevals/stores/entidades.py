"""
Gestão Chevals - Entidades Store
"""
from typing import List

from gestao_chevals.models import Entidade, TipoEntidade
from .base import ResourceStore


class EntidadeStore(ResourceStore[Entidade]):
    table = "entidades"
    model = Entidade
    order_by = "nome"
    descending = False
    active_only = True
    soft_delete = True
    label = "entidade"
    label_plural = "entidades"

    def by_tipo(self, tipo: TipoEntidade) -> List[Entidade]:
        return [e for e in self.items if e.has_tipo(tipo)]
