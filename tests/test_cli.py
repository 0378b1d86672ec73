import io

from treko.cli import PanelShell


def _shell(store_client, answers):
    out = io.StringIO()
    answers = list(answers)
    shell = PanelShell(
        store_client,
        ask=lambda prompt: answers.pop(0),
        ask_secret=lambda prompt: answers.pop(0),
        stdout=out,
    )
    return shell, out


def test_commands_need_login(store_client):
    shell, out = _shell(store_client, [])
    shell.onecmd("list")
    assert "Faça login primeiro." in out.getvalue()


def test_login_failure_shows_message(store_client):
    shell, out = _shell(store_client, ["42", "Maria", "errada"])
    shell.onecmd("login")
    assert "! Credenciais inválidas." in out.getvalue()
    assert shell.prompt == "login> "


def test_session_walkthrough(store_client):
    shell, out = _shell(store_client, ["42", "Maria", "segredo", "s"])
    shell.onecmd("login")
    text = out.getvalue()
    assert shell.prompt == "estoque> "
    assert "Produtos em Estoque (3)" in text
    assert "Sem descrição - R$ 38.00" in text

    shell.onecmd("set nome Lápis")
    shell.onecmd("set preco abc")
    shell.onecmd("save")
    assert "! Nome e Preço (maior que zero) são obrigatórios." in out.getvalue()

    shell.onecmd("set preco 1.75")
    shell.onecmd("save")
    assert "Cadastrar: ok" in out.getvalue()
    assert "Produtos em Estoque (4)" in out.getvalue()

    created = shell.manager.collection.products[0]
    shell.onecmd(f"edit {created.id}")
    assert f"Editando #{created.id}" in out.getvalue()
    assert "[Editar Produto]" in out.getvalue()

    shell.onecmd(f"delete {created.id}")
    assert f"Produto #{created.id} excluído." in out.getvalue()
    assert shell.manager.form.target_id is None

    shell.onecmd("search xyz")
    assert "Nenhum produto encontrado." in out.getvalue()

    shell.onecmd("logout")
    assert shell.panel.view == "login"


def test_delete_declined(store_client):
    shell, out = _shell(store_client, ["42", "Maria", "segredo", "n"])
    shell.onecmd("login")
    first = shell.manager.collection.products[0].id
    shell.onecmd(f"delete {first}")
    assert len(shell.manager.collection.products) == 3
    assert "excluído" not in out.getvalue()


def test_declined_delete_does_not_repeat_an_old_error(store_client):
    shell, out = _shell(store_client, ["42", "Maria", "segredo", "n"])
    shell.onecmd("login")
    shell.onecmd("save")
    assert "! Nome e Preço (maior que zero) são obrigatórios." in out.getvalue()

    mark = len(out.getvalue())
    shell.onecmd("delete 1")
    tail = out.getvalue()[mark:]
    assert tail == "Exclusão cancelada.\n"
    assert len(shell.manager.collection.products) == 3
