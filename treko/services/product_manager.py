import enum
from typing import Callable, Optional

from treko.adapters.remote_store import RemoteStoreClient, RemoteStoreError, user_message
from treko.schemas.product_schema import Product
from treko.services.edit_mode import EditModeController, validate
from treko.services.product_collection import ProductCollection
from treko.utils.log import get_logger

log = get_logger("treko.produtos")

INVALID_DRAFT = "Nome e Preço (maior que zero) são obrigatórios."
SAVE_FAILED = "Erro ao salvar produto."
DELETE_FAILED = "Erro ao excluir produto."
DELETE_PROMPT = "Tem certeza que deseja excluir este produto?"


class DeletionState(enum.Enum):
    PENDING_CONFIRMATION = "pending_confirmation"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class DeletionRequest:
    def __init__(self, product_id: int):
        self.product_id = product_id
        self.state = DeletionState.PENDING_CONFIRMATION
        self.prompt = DELETE_PROMPT
        # set once confirmed: True when the store accepted the delete
        self.succeeded: Optional[bool] = None

    def __repr__(self):
        return f"<DeletionRequest product_id={self.product_id} state={self.state.value}>"


class ProductManager:
    """
    Product list plus create/edit form.

    The collection owns the list and the single error line; the edit controller
    owns the form mode. Every mutation of the list happens here, after the store
    has accepted the call.
    """

    def __init__(
        self,
        client: RemoteStoreClient,
        on_start_edit: Optional[Callable[[Product], None]] = None,
    ):
        self.client = client
        self.collection = ProductCollection()
        self.form = EditModeController(on_start_edit=on_start_edit)

    @property
    def error(self) -> Optional[str]:
        return self.collection.error

    def mount(self):
        return self.collection.load(self.client)

    def search(self, term: str) -> None:
        self.collection.search_term = term or ""

    def start_edit(self, product_id: int) -> Product:
        product = self.collection.find(product_id)
        if product is None:
            raise KeyError(product_id)
        self.form.start_edit(product)
        return product

    def submit(self) -> bool:
        payload = validate(self.form.draft)
        if payload is None:
            self.collection.error = INVALID_DRAFT
            return False
        self.collection.error = None

        target_id = self.form.target_id
        try:
            if target_id is not None:
                saved = self.client.update_product(target_id, payload)
            else:
                saved = self.client.create_product(payload)
        except RemoteStoreError as e:
            log.error("could not save product: %s", e)
            self.collection.error = user_message(e, SAVE_FAILED)
            return False

        if target_id is not None:
            self.collection.replace(saved, target_id)
            log.info("updated product %s", target_id)
        else:
            self.collection.prepend(saved)
            log.info("created product %s", saved.id)
        self.form.cancel_edit()
        return True

    def request_delete(self, product_id: int) -> DeletionRequest:
        return DeletionRequest(product_id)

    def cancel_delete(self, request: DeletionRequest) -> None:
        self._require_pending(request)
        request.state = DeletionState.CANCELLED

    def confirm_delete(self, request: DeletionRequest) -> bool:
        self._require_pending(request)
        request.state = DeletionState.CONFIRMED
        try:
            self.client.delete_product(request.product_id)
        except RemoteStoreError as e:
            log.error("could not delete product %s: %s", request.product_id, e)
            self.collection.error = user_message(e, DELETE_FAILED)
            request.succeeded = False
            return False

        self.collection.remove(request.product_id)
        if self.form.forget(request.product_id):
            log.info("edit session closed, product %s was deleted", request.product_id)
        request.succeeded = True
        return True

    def delete(self, product_id: int, confirm: Callable[[str], bool]) -> bool:
        """Ask ``confirm(prompt)`` and delete only on a yes."""
        request = self.request_delete(product_id)
        if not confirm(request.prompt):
            self.cancel_delete(request)
            return False
        return self.confirm_delete(request)

    def _require_pending(self, request: DeletionRequest):
        if request.state is not DeletionState.PENDING_CONFIRMATION:
            raise ValueError(f"Deletion already {request.state.value}")
