"""
Gestão Chevals - Projetos Store
"""
from typing import List

from gestao_chevals.models import Projeto, ProjetoStatus
from .base import ResourceStore


class ProjetoStore(ResourceStore[Projeto]):
    table = "projetos"
    model = Projeto
    label = "projeto"
    label_plural = "projetos"

    def by_status(self, status: ProjetoStatus) -> List[Projeto]:
        return [p for p in self.items if p.status == status]
