from typing import Optional

from treko.adapters.remote_store import (
    CONNECTION_FAILED,
    RemoteStoreClient,
    RemoteStoreError,
    user_message,
)
from treko.services.session_gate import SessionGate
from treko.utils.log import get_logger

log = get_logger("treko.login")

MISSING_FIELDS = "Por favor, preencha todos os campos."
INVALID_CREDENTIALS = "Credenciais inválidas."


class LoginForm:
    def __init__(self, client: RemoteStoreClient, gate: SessionGate):
        self.client = client
        self.gate = gate
        self.error: Optional[str] = None
        self.is_loading = False

    @property
    def submit_label(self) -> str:
        return "Acessando..." if self.is_loading else "Entrar"

    def submit(self, codigo: str, nome: str, password: str) -> bool:
        """
        Validate the three fields and issue one login call.
        Returns True when the gate was opened; otherwise ``self.error`` holds the reason.
        """
        self.error = None
        self.is_loading = True
        try:
            if not all((v or "").strip() for v in (codigo, nome, password)):
                self.error = MISSING_FIELDS
                return False

            try:
                body = self.client.login(codigo, nome, password)
            except RemoteStoreError as e:
                log.error("login failed for %s: %s", codigo, e)
                self.error = user_message(e, CONNECTION_FAILED, rejected=INVALID_CREDENTIALS)
                return False

            log.info("login ok for %s: %s", codigo, body)
            self.gate.login(True)
            return True
        finally:
            self.is_loading = False
