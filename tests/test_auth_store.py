import asyncio

from gestao_chevals.backend import MOCK_CREDENTIALS, MockBackend
from gestao_chevals.core.errors import BackendError
from gestao_chevals.stores import AuthStatus, AuthStore


class CountingBackend(MockBackend):
    def __init__(self, database):
        super().__init__(database)
        self.session_lookups = 0

    async def get_session(self):
        self.session_lookups += 1
        await asyncio.sleep(0.01)
        return await super().get_session()


async def test_login_mock_valido(backend):
    auth = AuthStore(backend)
    result = await auth.sign_in(MOCK_CREDENTIALS["email"], MOCK_CREDENTIALS["password"])

    assert result.success is True
    assert result.requires_password_change is False
    assert auth.user is not None
    assert auth.user.email == MOCK_CREDENTIALS["email"]
    assert auth.profile.nome == "Administrador"
    assert auth.loading is False


async def test_login_invalido(backend):
    auth = AuthStore(backend)
    result = await auth.sign_in(MOCK_CREDENTIALS["email"], "senha-errada")

    assert result.success is False
    assert result.error == "Credenciais inválidas"
    assert auth.user is None
    assert auth.error == "Credenciais inválidas"


async def test_primeiro_login_exige_troca_de_senha(backend, db):
    user = db.add_user("novo@chevals.com", "Temp1234", nome="Novo", primeiro_login=True)
    auth = AuthStore(backend)

    result = await auth.sign_in("novo@chevals.com", "Temp1234")

    assert result.success is True
    assert result.requires_password_change is True
    linha = next(r for r in db.tables["users"] if r["id"] == user.id)
    assert linha["primeiro_login"] is False

    segundo = await auth.sign_in("novo@chevals.com", "Temp1234")
    assert segundo.requires_password_change is False


async def test_initialize_concorrente_executa_uma_vez(db):
    backend = CountingBackend(db)
    auth = AuthStore(backend)

    await asyncio.gather(auth.initialize(), auth.initialize())
    await auth.initialize()

    assert backend.session_lookups == 1
    assert auth.initialized is True
    assert auth.status == AuthStatus.READY
    assert auth.user is None


async def test_initialize_restaura_sessao(logged_backend):
    auth = AuthStore(logged_backend)
    await auth.initialize()

    assert auth.user.email == MOCK_CREDENTIALS["email"]
    assert auth.profile is not None


async def test_eventos_de_sessao_mantem_estado(backend):
    auth = AuthStore(backend)
    await auth.initialize()

    await backend.sign_in(MOCK_CREDENTIALS["email"], MOCK_CREDENTIALS["password"])
    assert auth.user is not None
    assert auth.profile.email == MOCK_CREDENTIALS["email"]

    await backend.sign_out()
    assert auth.user is None
    assert auth.profile is None


async def test_sign_out(backend):
    auth = AuthStore(backend)
    await auth.sign_in(MOCK_CREDENTIALS["email"], MOCK_CREDENTIALS["password"])
    await auth.sign_out()

    assert auth.user is None
    assert auth.profile is None
    assert await backend.get_session() is None


async def test_change_password_confere_senha_atual(backend):
    auth = AuthStore(backend)
    await auth.sign_in(MOCK_CREDENTIALS["email"], MOCK_CREDENTIALS["password"])

    errado = await auth.change_password("incorreta", "NovaSenha1")
    assert errado.success is False
    assert errado.error == "Senha atual incorreta"

    ok = await auth.change_password(MOCK_CREDENTIALS["password"], "NovaSenha1")
    assert ok.success is True
    await auth.sign_out()
    assert (await auth.sign_in(MOCK_CREDENTIALS["email"], "NovaSenha1")).success is True


async def test_change_password_primeiro_acesso(backend):
    auth = AuthStore(backend)
    await auth.sign_in(MOCK_CREDENTIALS["email"], MOCK_CREDENTIALS["password"])

    result = await auth.change_password(None, "NovaSenha1")
    assert result.success is True


async def test_change_password_sem_sessao(backend):
    auth = AuthStore(backend)
    result = await auth.change_password(None, "NovaSenha1")
    assert result.success is False
    assert result.error == "Usuário não autenticado"


async def test_update_user_profile_notifica(backend):
    auth = AuthStore(backend)
    await auth.sign_in(MOCK_CREDENTIALS["email"], MOCK_CREDENTIALS["password"])
    notificacoes = []
    auth.subscribe(lambda a: notificacoes.append(a.profile.nome))

    auth.update_user_profile(auth.profile.model_copy(update={"nome": "Admin Geral"}))

    assert auth.profile.nome == "Admin Geral"
    assert notificacoes == ["Admin Geral"]


class ReadOnlyUsersBackend(MockBackend):
    async def update(self, table, filters, patch):
        if table == "users":
            raise BackendError("permission denied for table users")
        return await super().update(table, filters, patch)


async def test_primeiro_login_sem_permissao_no_perfil_nao_falha(db):
    db.add_user("novo@chevals.com", "Temp1234", nome="Novo", primeiro_login=True)
    backend = ReadOnlyUsersBackend(db)
    auth = AuthStore(backend)

    result = await auth.sign_in("novo@chevals.com", "Temp1234")

    assert result.success is True
    assert result.requires_password_change is True
    assert result.error is None
    assert auth.user.email == "novo@chevals.com"
    assert auth.error is None
    assert await backend.get_session() is not None
