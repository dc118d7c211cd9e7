import asyncio

import pytest

from gestao_chevals.backend import MockBackend
from gestao_chevals.core.errors import BackendError
from gestao_chevals.models import TipoEntidade
from gestao_chevals.stores import (
    CanalVendaStore,
    ContratoStore,
    EmpresaStore,
    EntidadeStore,
    ProjetoStore,
    UnidadeStore,
    UsuarioStore,
)


class FailingBackend(MockBackend):
    async def select(self, table, filters=None, order=None, columns="*"):
        raise BackendError("Falha de comunicação com o servidor")

    async def insert(self, table, row):
        raise BackendError("duplicate key value violates unique constraint")


class SlowFirstSelectBackend(MockBackend):
    """Primeira busca responde por último, com dados antigos"""

    def __init__(self, database):
        super().__init__(database)
        self.calls = 0

    async def select(self, table, filters=None, order=None, columns="*"):
        self.calls += 1
        rows = await super().select(table, filters, order, columns)
        if self.calls == 1:
            await asyncio.sleep(0.05)
        return rows


async def test_fetch_ordena_e_filtra_ativos(backend, db):
    db.seed("entidades", [{"id": "9", "nome": "Inativa", "e_cliente": True, "ativo": False}])
    store = EntidadeStore(backend)
    await store.fetch()

    assert [e.nome for e in store.items] == ["João Silva", "Maria Santos"]
    assert store.loading is False
    assert store.error is None


async def test_create_e_get_by_id(backend):
    store = EmpresaStore(backend)
    await store.fetch()
    dados = {"nome": "Arena Sul", "cnpj": "11.222.333/0001-44", "cidade": "Porto Alegre"}

    criada = await store.create(dados)
    encontrada = store.get_by_id(criada.id)

    assert encontrada is not None
    assert encontrada.nome == "Arena Sul"
    assert encontrada.cnpj == "11.222.333/0001-44"
    assert encontrada.cidade == "Porto Alegre"
    assert encontrada.created_at is not None
    assert encontrada.updated_at is not None


async def test_create_mantem_ordem_crescente(backend):
    store = EmpresaStore(backend)
    await store.fetch()
    await store.create({"nome": "Alpha Eventos"})
    assert [e.nome for e in store.items] == ["Alpha Eventos", "Chevals Eventos", "Eventos Premium"]


async def test_create_insere_no_topo_em_ordem_decrescente(backend):
    store = ProjetoStore(backend)
    await store.fetch()
    novo = await store.create({"nome": "Formatura 2026"})
    assert store.items[0].id == novo.id


async def test_soft_delete(backend, db):
    store = EntidadeStore(backend)
    await store.fetch()

    await store.delete("1")
    await store.fetch()

    assert store.get_by_id("1") is None
    removida = await store.find("1")
    assert removida is not None
    assert removida.ativo is False
    assert any(r["id"] == "1" for r in db.tables["entidades"])


async def test_hard_delete(backend, db):
    store = EmpresaStore(backend)
    await store.fetch()

    await store.delete("2")

    assert store.get_by_id("2") is None
    assert await store.find("2") is None
    assert not any(r["id"] == "2" for r in db.tables["empresas"])


async def test_update_nao_altera_campos_fora_do_patch(backend, db):
    store = EntidadeStore(backend)
    await store.fetch()
    antes = store.get_by_id("1")

    depois = await store.update("1", {"telefone": "(11) 5555-0000"})

    assert depois.telefone == "(11) 5555-0000"
    for campo in ("nome", "documento", "email", "e_cliente", "e_parceiro", "e_fornecedor", "ativo"):
        assert getattr(depois, campo) == getattr(antes, campo)
    linha = next(r for r in db.tables["entidades"] if r["id"] == "1")
    assert linha["email"] == "joao@email.com"
    assert store.get_by_id("1").telefone == "(11) 5555-0000"


async def test_update_registro_inexistente(backend):
    store = EmpresaStore(backend)
    with pytest.raises(BackendError, match="Registro não encontrado"):
        await store.update("999", {"nome": "x"})
    assert store.error == "Registro não encontrado"
    assert store.loading is False


async def test_fetch_com_falha_registra_erro(db):
    store = EmpresaStore(FailingBackend(db))
    items = await store.fetch()

    assert items == []
    assert store.error == "Falha de comunicação com o servidor"
    assert store.loading is False


async def test_mutacao_com_falha_relanca(db):
    store = CanalVendaStore(FailingBackend(db))
    with pytest.raises(BackendError):
        await store.create({"nome": "Online", "tipo": "online"})
    assert store.error == "duplicate key value violates unique constraint"
    assert store.items == []


async def test_busca_antiga_nao_sobrescreve_a_recente(db):
    store = EmpresaStore(SlowFirstSelectBackend(db))

    async def segunda_busca():
        db.seed("empresas", [{"id": "10", "nome": "Recém Cadastrada", "ativo": True}])
        await store.fetch()

    await asyncio.gather(store.fetch(), segunda_busca())

    assert "Recém Cadastrada" in [e.nome for e in store.items]
    assert store.loading is False


async def test_subscribe_notifica_mudancas(backend):
    store = EmpresaStore(backend)
    eventos = []
    unsubscribe = store.subscribe(lambda s: eventos.append(len(s.items)))

    await store.fetch()
    await store.create({"nome": "Nova"})
    unsubscribe()
    await store.delete("1")

    assert eventos == [2, 3]


async def test_filtros_derivados(backend):
    entidades = EntidadeStore(backend)
    unidades = UnidadeStore(backend)
    await entidades.fetch()
    await unidades.fetch()

    assert [e.nome for e in entidades.by_tipo(TipoEntidade.PARCEIRO)] == ["Maria Santos"]
    assert len(unidades.by_empresa(1)) == 2
    assert unidades.by_empresa("2") == []


async def test_usuarios_toggle_e_exclusao(backend, db):
    operador = db.add_user("operador@chevals.com", "Senha1234", nome="Operador")
    store = UsuarioStore(backend)
    await store.fetch()

    desativado = await store.toggle_ativo(operador.id)
    assert desativado.ativo is False

    await store.remove_account(operador.id)
    assert store.get_by_id(operador.id) is None
    assert await store.find(operador.id) is None


async def test_usuarios_exclusao_inexistente(backend):
    store = UsuarioStore(backend)
    with pytest.raises(BackendError):
        await store.remove_account("nao-existe")
    assert store.error == "Usuário não encontrado"


async def test_colunas_nulas_assumem_default(backend, db):
    db.tables["contratos"] = []
    db.seed("contratos", [{
        "id": "c1",
        "numero": "CT-001",
        "nome_evento": "Festival",
        "valor_total": None,
        "num_diarias": None,
        "status": None,
    }])
    store = ContratoStore(backend)

    items = await store.fetch()

    assert store.error is None
    assert items[0].valor_total == 0
    assert items[0].num_diarias == 0
    assert items[0].status.value == "rascunho"


async def test_linha_fora_do_formato_registra_erro(backend, db):
    db.tables["contratos"] = []
    db.seed("contratos", [{"id": "c1", "numero": "CT-001", "nome_evento": None}])
    store = ContratoStore(backend)

    items = await store.fetch()

    assert items == []
    assert store.error == "Resposta inválida do servidor (nome_evento)"
    assert store.loading is False

    with pytest.raises(BackendError):
        await store.find("c1")
