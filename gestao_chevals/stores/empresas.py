"""
Gestão Chevals - Empresas Store
"""
from gestao_chevals.models import Empresa
from .base import ResourceStore


class EmpresaStore(ResourceStore[Empresa]):
    table = "empresas"
    model = Empresa
    order_by = "nome"
    descending = False
    label = "empresa"
    label_plural = "empresas"
