from treko.services.panel import AdminPanel
from treko.services.product_collection import LoadStatus
from treko.services.session_gate import SessionGate


def test_gate_only_opens_on_success():
    gate = SessionGate()
    gate.login(False)
    assert gate.logged_in is False
    gate.login(True)
    assert gate.logged_in is True
    gate.logout()
    assert gate.logged_in is False


def test_panel_shows_login_until_authenticated(store_client):
    panel = AdminPanel(store_client)
    assert panel.view == "login"
    assert panel.manager is None

    assert panel.login("42", "Maria", "errada") is False
    assert panel.view == "login"
    assert panel.login_form.error == "Credenciais inválidas."

    assert panel.login("42", "Maria", "segredo") is True
    assert panel.view == "products"
    assert panel.manager.collection.status is LoadStatus.LOADED
    assert [p.nome for p in panel.manager.collection.products] == ["Caneta", "Caderno", "Grampeador"]


def test_logout_drops_the_manager(store_client):
    panel = AdminPanel(store_client)
    panel.login("42", "Maria", "segredo")
    panel.manager.search("can")
    panel.logout()
    assert panel.view == "login"
    assert panel.manager is None

    # next login mounts a fresh manager with its own single load
    panel.login("42", "Maria", "segredo")
    assert panel.manager.collection.search_term == ""
    assert len(panel.manager.collection.products) == 3
