from gestao_chevals.backend import MOCK_CREDENTIALS
from gestao_chevals.core.config import settings
from gestao_chevals.stores import SessionRegistry


async def _logged_state(sessions):
    state = await sessions.anonymous()
    result = await state.auth.sign_in(MOCK_CREDENTIALS["email"], MOCK_CREDENTIALS["password"])
    assert result.success is True
    return state


async def test_sessao_vencida_e_encerrada(mock_settings, db):
    sessions = SessionRegistry(mock_settings, database=db)
    ativa = await _logged_state(sessions)
    vencida = await _logged_state(sessions)
    sid_ativo = sessions.adopt(ativa, expires_in=3600)
    sid_vencido = sessions.adopt(vencida, expires_in=0)

    assert await sessions.get(sid_vencido) is None
    assert await sessions.get(sid_ativo) is ativa
    assert len(sessions) == 1
    assert vencida.auth._unsubscribe is None


async def test_sessao_encerrada_no_backend_e_descartada(mock_settings, db):
    sessions = SessionRegistry(mock_settings, database=db)
    state = await _logged_state(sessions)
    sid = sessions.adopt(state, expires_in=3600)

    await state.backend.sign_out()

    assert await sessions.get(sid) is None
    assert len(sessions) == 0


async def test_get_sem_sid_tambem_limpa(mock_settings, db):
    sessions = SessionRegistry(mock_settings, database=db)
    sessions.adopt(await _logged_state(sessions), expires_in=0)

    assert await sessions.get(None) is None
    assert len(sessions) == 0


def test_token_vencido_libera_o_estado(client, monkeypatch):
    for _ in range(3):
        assert client.post("/api/auth/login", json=MOCK_CREDENTIALS).status_code == 200

    monkeypatch.setattr(settings, "ACCESS_TOKEN_EXPIRE_MINUTES", 0)
    token = client.post("/api/auth/login", json=MOCK_CREDENTIALS).json()["access_token"]
    assert len(client.app.state.sessions) == 4

    response = client.get(
        "/api/entidades",
        headers={"Authorization": f"Bearer {token}"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert len(client.app.state.sessions) == 3
