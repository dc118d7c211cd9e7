import pytest

from gestao_chevals.backend import (
    MOCK_CREDENTIALS,
    MockBackend,
    SessionEvent,
    create_backend,
)
from gestao_chevals.core.config import Settings
from gestao_chevals.core.errors import BackendError, ConfigurationError


async def test_insert_atribui_id_e_timestamps(backend):
    row = await backend.insert("empresas", {"nome": "Nova Empresa"})
    assert row["id"]
    assert row["created_at"] and row["updated_at"]
    assert row["nome"] == "Nova Empresa"


async def test_select_filtra_e_ordena(backend):
    rows = await backend.select("unidades", filters={"empresa_id": "1"}, order=[("capacidade", True)])
    assert [r["nome"] for r in rows] == ["Salão Principal", "Área VIP"]

    rows = await backend.select("unidades", filters={"empresa_id": 1})
    assert len(rows) == 2


async def test_select_devolve_copias(backend, db):
    rows = await backend.select("empresas")
    rows[0]["nome"] = "alterado"
    assert db.tables["empresas"][0]["nome"] != "alterado"


async def test_update_altera_apenas_o_patch(backend, db):
    rows = await backend.update("entidades", {"id": "1"}, {"telefone": "(11) 0000-0000"})
    assert len(rows) == 1
    assert rows[0]["telefone"] == "(11) 0000-0000"
    assert rows[0]["email"] == "joao@email.com"


async def test_update_sem_correspondencia_devolve_lista_vazia(backend):
    assert await backend.update("entidades", {"id": "999"}, {"nome": "x"}) == []


async def test_sign_in_invalido(backend):
    with pytest.raises(BackendError) as exc:
        await backend.sign_in(MOCK_CREDENTIALS["email"], "errada")
    assert exc.value.message == "Credenciais inválidas"
    assert await backend.get_session() is None


async def test_eventos_de_sessao(backend):
    eventos = []

    async def listener(event, session):
        eventos.append((event, session))

    unsubscribe = backend.on_session_change(listener)
    await backend.sign_in(MOCK_CREDENTIALS["email"], MOCK_CREDENTIALS["password"])
    await backend.sign_out()
    unsubscribe()
    await backend.sign_in(MOCK_CREDENTIALS["email"], MOCK_CREDENTIALS["password"])

    assert [e for e, _ in eventos] == [SessionEvent.SIGNED_IN, SessionEvent.SIGNED_OUT]
    assert eventos[0][1].user.email == MOCK_CREDENTIALS["email"]
    assert eventos[1][1] is None


async def test_sessao_isolada_por_instancia(db):
    a = MockBackend(db)
    b = MockBackend(db)
    await a.sign_in(MOCK_CREDENTIALS["email"], MOCK_CREDENTIALS["password"])
    assert await a.get_session() is not None
    assert await b.get_session() is None


async def test_update_password_exige_sessao(backend):
    with pytest.raises(BackendError):
        await backend.update_password("NovaSenha1")


async def test_update_password(logged_backend):
    await logged_backend.update_password("NovaSenha1")
    await logged_backend.sign_out()
    session = await logged_backend.sign_in(MOCK_CREDENTIALS["email"], "NovaSenha1")
    assert session.user.email == MOCK_CREDENTIALS["email"]


async def test_delete_user_remove_identidade_e_perfil(backend, db):
    user = db.add_user("operador@chevals.com", "Senha1234", nome="Operador")
    await backend.delete_user(user.id)

    assert "operador@chevals.com" not in db.credentials
    assert not [r for r in db.tables["users"] if r["id"] == user.id]
    with pytest.raises(BackendError):
        await backend.delete_user(user.id)


async def test_create_backend_mock(db):
    backend = await create_backend(Settings(MOCK_MODE=True, MOCK_LATENCY_MS=0), database=db)
    assert isinstance(backend, MockBackend)
    assert backend.database is db


async def test_create_backend_sem_configuracao():
    settings = Settings(MOCK_MODE=False, SUPABASE_URL=None, SUPABASE_ANON_KEY=None)
    with pytest.raises(ConfigurationError, match="Missing Supabase environment variables"):
        await create_backend(settings)


def test_placeholders_em_modo_mock():
    settings = Settings(MOCK_MODE=True, SUPABASE_URL=None, SUPABASE_ANON_KEY=None)
    assert settings.backend_url == "https://mock.supabase.co"
    assert settings.backend_key == "mock-anon-key"
