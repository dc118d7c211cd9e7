"""
Gestão Chevals - Usuários Store
Perfis da tabela users; exclusão definitiva passa pela API administrativa de autenticação
"""
import logging

from gestao_chevals.core.errors import BackendError
from gestao_chevals.models import RecordId, Usuario, same_id
from .base import ResourceStore

logger = logging.getLogger(__name__)


class UsuarioStore(ResourceStore[Usuario]):
    table = "users"
    model = Usuario
    order_by = "nome"
    descending = False
    label = "usuário"
    label_plural = "usuários"

    async def toggle_ativo(self, record_id: RecordId) -> Usuario:
        usuario = self.get_by_id(record_id) or await self.find(record_id)
        if usuario is None:
            raise BackendError("Usuário não encontrado")
        return await self.update(record_id, {"ativo": not usuario.ativo})

    async def remove_account(self, record_id: RecordId) -> None:
        """Remove a identidade de autenticação; o perfil sai junto por cascade"""
        self._begin()
        try:
            await self.backend.delete_user(str(record_id))
        except BackendError as e:
            self._fail(e, "Erro ao excluir usuário")
            raise
        finally:
            self._end()

        logger.info(f"Usuário {record_id} excluído")
        self.items = [u for u in self.items if not same_id(u.id, record_id)]
        self._notify()
