from typing import Callable, Optional

from treko.adapters.remote_store import RemoteStoreClient
from treko.schemas.product_schema import Product
from treko.services.login_form import LoginForm
from treko.services.product_manager import ProductManager
from treko.services.session_gate import SessionGate


class AdminPanel:
    """
    Top-level shell: the login form until the gate opens, then a product manager.
    Each successful login mounts a fresh manager (one list fetch); logout drops it.
    """

    def __init__(
        self,
        client: RemoteStoreClient,
        on_start_edit: Optional[Callable[[Product], None]] = None,
    ):
        self.client = client
        self.gate = SessionGate()
        self.login_form = LoginForm(client, self.gate)
        self.manager: Optional[ProductManager] = None
        self._on_start_edit = on_start_edit

    @property
    def view(self) -> str:
        return "products" if self.gate.logged_in else "login"

    def login(self, codigo: str, nome: str, password: str) -> bool:
        if not self.login_form.submit(codigo, nome, password):
            return False
        self.manager = ProductManager(self.client, on_start_edit=self._on_start_edit)
        self.manager.mount()
        return True

    def logout(self) -> None:
        self.gate.logout()
        self.manager = None
        self.login_form = LoginForm(self.client, self.gate)
