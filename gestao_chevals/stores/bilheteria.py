"""
Gestão Chevals - Bilheteria Store
Canais de venda de ingressos
"""
from typing import List

from gestao_chevals.models import CanalVenda
from .base import ResourceStore


class CanalVendaStore(ResourceStore[CanalVenda]):
    table = "canais_venda"
    model = CanalVenda
    label = "canal de venda"
    label_plural = "canais de venda"

    @property
    def ativos(self) -> List[CanalVenda]:
        return [c for c in self.items if c.ativo]
