"""
Gestão Chevals - Entidade Model
Clientes, parceiros e fornecedores
"""
from typing import List, Optional
import enum

from .base import Record


class TipoEntidade(str, enum.Enum):
    """Papéis que uma entidade pode acumular"""
    CLIENTE = "cliente"
    PARCEIRO = "parceiro"
    FORNECEDOR = "fornecedor"


class Entidade(Record):
    nome: str
    e_cliente: bool = False
    e_parceiro: bool = False
    e_fornecedor: bool = False
    documento: Optional[str] = None
    email: Optional[str] = None
    telefone: Optional[str] = None
    endereco: Optional[str] = None
    ativo: bool = True

    @property
    def tipos(self) -> List[TipoEntidade]:
        flags = {
            TipoEntidade.CLIENTE: self.e_cliente,
            TipoEntidade.PARCEIRO: self.e_parceiro,
            TipoEntidade.FORNECEDOR: self.e_fornecedor,
        }
        return [tipo for tipo, marcado in flags.items() if marcado]

    def has_tipo(self, tipo: TipoEntidade) -> bool:
        return tipo in self.tipos
