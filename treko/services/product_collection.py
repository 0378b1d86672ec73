import enum
from typing import List, Optional

from treko.adapters.remote_store import RemoteStoreClient, RemoteStoreError
from treko.schemas.product_schema import Product
from treko.utils.log import get_logger

log = get_logger("treko.produtos")

LOAD_FAILED = "Não foi possível carregar os produtos. Verifique o back-end."


class LoadStatus(enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    EMPTY = "empty"
    FAILED = "failed"


def matches(product: Product, term: str) -> bool:
    term = term.lower()
    return bool(
        (product.nome and term in product.nome.lower())
        or (product.descricao and term in product.descricao.lower())
    )


def filter_products(products: List[Product], term: str) -> List[Product]:
    """Case-insensitive substring match on nome or descricao; empty term keeps everything."""
    if not term:
        return list(products)
    return [p for p in products if matches(p, term)]


class ProductCollection:
    """
    Local copy of the store's product list.

    The list is fetched once by ``load``; afterwards it only changes through
    ``prepend``/``replace``/``remove`` after a successful remote call.
    """

    def __init__(self):
        self.products: List[Product] = []
        self.status = LoadStatus.IDLE
        self.error: Optional[str] = None
        self.search_term = ""

    @property
    def loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    def load(self, client: RemoteStoreClient) -> LoadStatus:
        if self.status is not LoadStatus.IDLE:
            # one shot; a failure stays until the panel is mounted again
            return self.status
        self.status = LoadStatus.LOADING
        self.error = None
        try:
            products = client.list_products()
        except RemoteStoreError as e:
            log.error("could not load products: %s", e)
            self.error = LOAD_FAILED
            self.status = LoadStatus.FAILED
            return self.status
        self.products = products
        self.status = LoadStatus.LOADED if products else LoadStatus.EMPTY
        log.info("loaded %d products", len(products))
        return self.status

    @property
    def filtered_products(self) -> List[Product]:
        return filter_products(self.products, self.search_term)

    def find(self, product_id: int) -> Optional[Product]:
        for p in self.products:
            if p.id == product_id:
                return p
        return None

    def prepend(self, product: Product) -> None:
        self.products = [product] + self.products

    def replace(self, product: Product, product_id: Optional[int] = None) -> bool:
        """Swap the entry whose id is ``product_id`` (default: the new record's id) in place."""
        key = product.id if product_id is None else product_id
        found = False
        updated = []
        for p in self.products:
            if p.id == key:
                updated.append(product)
                found = True
            else:
                updated.append(p)
        self.products = updated
        return found

    def remove(self, product_id: int) -> bool:
        kept = [p for p in self.products if p.id != product_id]
        removed = len(kept) != len(self.products)
        self.products = kept
        return removed

    @property
    def heading(self) -> str:
        return f"Produtos em Estoque ({len(self.filtered_products)})"

    @property
    def empty_message(self) -> Optional[str]:
        if self.loading or self.filtered_products:
            return None
        return "Nenhum produto encontrado." if self.search_term else "Nenhum produto cadastrado."
