from gestao_chevals.backend import MockBackend
from gestao_chevals.core.errors import BackendError
from gestao_chevals.forms import FormMessages, ResourceForm
from gestao_chevals.schemas import (
    CanalVendaForm,
    ContratoForm,
    EmpresaForm,
    EntidadeForm,
    MovimentacaoForm,
    PasswordChangeForm,
    ProjetoForm,
)
from gestao_chevals.stores import (
    CanalVendaStore,
    ContratoStore,
    EntidadeStore,
    MovimentacaoStore,
)


class RecordingStore(EntidadeStore):
    def __init__(self, backend):
        super().__init__(backend)
        self.calls = []

    async def create(self, data):
        self.calls.append(("create", data))
        return await super().create(data)

    async def update(self, record_id, patch):
        self.calls.append(("update", record_id, patch))
        return await super().update(record_id, patch)


class RejectingBackend(MockBackend):
    async def insert(self, table, row):
        raise BackendError("new row violates row-level security policy")


async def test_nome_vazio_bloqueia_envio(backend):
    store = RecordingStore(backend)
    form = ResourceForm(EntidadeForm, store)

    result = await form.submit({"nome": "   ", "e_cliente": True})

    assert result.success is False
    assert result.errors["nome"] == "Nome é obrigatório"
    assert store.calls == []


async def test_tipo_obrigatorio(backend):
    form = ResourceForm(EntidadeForm, EntidadeStore(backend))
    result = await form.submit({"nome": "Fornecedor X"})
    assert result.errors == {"tipos": "Selecione pelo menos um tipo"}


def test_email_invalido(backend):
    form = ResourceForm(EntidadeForm, EntidadeStore(backend))
    payload, errors = form.validate({"nome": "X", "e_cliente": True, "email": "nao-e-email"})
    assert payload is None
    assert errors["email"] == "E-mail inválido"


async def test_campos_vazios_enviados_como_nulos(backend, db):
    store = RecordingStore(backend)
    form = ResourceForm(EntidadeForm, store, FormMessages(created="Entidade criada com sucesso"))

    result = await form.submit({"nome": " Buffet Central ", "e_fornecedor": True, "telefone": "", "email": ""})

    assert result.success is True
    assert result.message == "Entidade criada com sucesso"
    assert result.record.nome == "Buffet Central"
    linha = next(r for r in db.tables["entidades"] if r["id"] == result.record.id)
    assert "telefone" in linha and linha["telefone"] is None
    assert linha["email"] is None
    assert len(store.calls) == 1


async def test_edicao_chama_update_com_campos_alterados(backend):
    store = RecordingStore(backend)
    await store.fetch()
    inicial = store.get_by_id("1")
    chamados = []
    form = ResourceForm(EntidadeForm, store)

    result = await form.submit({"telefone": "(11) 3333-4444"}, initial=inicial, on_success=chamados.append)

    assert result.success is True
    assert store.calls == [("update", "1", {"telefone": "(11) 3333-4444"})]
    assert chamados == [result.record]
    assert result.record.nome == "João Silva"


async def test_falha_remota_vira_mensagem(db):
    form = ResourceForm(CanalVendaForm, CanalVendaStore(RejectingBackend(db)))
    result = await form.submit({"nome": "Online", "tipo": "online"})
    assert result.success is False
    assert result.message == "new row violates row-level security policy"


async def test_canal_taxa_padrao(backend):
    form = ResourceForm(CanalVendaForm, CanalVendaStore(backend))
    result = await form.submit({"nome": "Site", "tipo": "online", "taxa_servico": ""})
    assert result.success is True
    assert result.record.taxa_servico == 0

    payload, errors = form.validate({"nome": "Site", "tipo": "online", "taxa_servico": "150"})
    assert errors == {"taxa_servico": "Taxa deve estar entre 0 e 100"}


async def test_contrato_calcula_valor_total(backend):
    form = ResourceForm(ContratoForm, ContratoStore(backend))
    result = await form.submit({
        "numero": "CT-2025-001",
        "nome_evento": "Congresso Médico",
        "valor_locacao": "12000",
        "valor_servicos": 3500.5,
    })
    assert result.success is True
    assert result.record.valor_total == 15500.5


def test_contrato_periodo_de_realizacao(backend):
    form = ResourceForm(ContratoForm, ContratoStore(backend))
    _, errors = form.validate({
        "numero": "CT-1",
        "nome_evento": "Show",
        "inicio_realizacao": "2025-12-10",
        "fim_realizacao": "2025-12-01",
    })
    assert "fim_realizacao" in errors


def test_projeto_datas():
    _, errors = ResourceForm(ProjetoForm, None).validate({
        "nome": "Feira",
        "data_inicio": "2025-10-10",
        "data_fim": "2025-10-01",
    })
    assert errors == {"data_fim": "Data de término deve ser maior ou igual à data de início"}


def test_empresa_estado():
    _, errors = ResourceForm(EmpresaForm, None).validate({"nome": "Chevals", "estado": "SPX"})
    assert errors == {"estado": "Estado deve ter 2 caracteres"}

    payload, _ = ResourceForm(EmpresaForm, None).validate({"nome": "Chevals", "estado": "sp"})
    assert payload.estado == "SP"


async def test_receita_campos_obrigatorios(backend):
    form = ResourceForm(MovimentacaoForm, MovimentacaoStore(backend))
    result = await form.submit({"tipo": "receita", "descricao": "", "valor": "0"})

    assert result.errors["descricao"] == "Descrição é obrigatória"
    assert result.errors["categoria"] == "Categoria é obrigatória"
    assert result.errors["valor"] == "Valor deve ser maior que zero"
    assert result.errors["data_vencimento"] == "Data de vencimento é obrigatória"


def test_movimentacao_paga_exige_data_de_pagamento():
    _, errors = ResourceForm(MovimentacaoForm, None).validate({
        "tipo": "despesa",
        "descricao": "Som e luz",
        "categoria": "Decoração",
        "valor": 800,
        "data_vencimento": "2025-11-01",
        "status": "pago",
    })
    assert errors == {"data_pagamento": "Informe a data de pagamento"}


def test_regras_de_senha():
    def erros(dados):
        form = ResourceForm(PasswordChangeForm, None)
        return form.validate(dados)[1]

    assert erros({"new_password": "Ab1", "confirm_password": "Ab1"}) == {
        "new_password": "A senha deve ter pelo menos 8 caracteres"
    }
    assert "new_password" in erros({"new_password": "semmaiuscula1", "confirm_password": "semmaiuscula1"})
    assert erros({"new_password": "NovaSenha1", "confirm_password": "OutraSenha1"}) == {
        "confirm_password": "As senhas não coincidem"
    }
    assert erros({"new_password": "NovaSenha1", "confirm_password": "NovaSenha1"}) == {}
