from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from treko.config import settings
from treko.schemas.product_schema import LoginIn, Product, ProductIn
from treko.utils.log import get_logger

log = get_logger("treko.remote_store")

SERVER_NO_RESPONSE = "Servidor não respondeu. O back-end está rodando?"
CONNECTION_FAILED = "Não foi possível conectar ao servidor."


class RemoteStoreError(Exception):
    """Base for every failure talking to the remote store."""

    message: Optional[str] = None


class RemoteStoreRejected(RemoteStoreError):
    """The store answered with a non-2xx status."""

    def __init__(self, status_code: int, message: Optional[str] = None, body: Any = None):
        super().__init__(message or f"HTTP {status_code}")
        self.status_code = status_code
        self.message = message
        self.body = body


class RemoteStoreNoResponse(RemoteStoreError):
    """The request went out but no response came back (timeout, dropped or refused connection)."""


class RemoteStoreUnreachable(RemoteStoreError):
    """The request could not be built or sent at all."""


def user_message(exc: RemoteStoreError, generic: str, rejected: Optional[str] = None) -> str:
    """
    Pick the single message shown to the user for a failed call.

    Args:
        exc: the error raised by RemoteStoreClient.
        generic: fallback when nothing more specific is known.
        rejected: fallback for a non-2xx answer without a body message (defaults to generic).
    """
    if isinstance(exc, RemoteStoreRejected):
        return exc.message or rejected or generic
    if isinstance(exc, RemoteStoreNoResponse):
        return SERVER_NO_RESPONSE
    return generic


def _server_message(body: Any) -> Optional[str]:
    if isinstance(body, dict):
        for key in ("error", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return None


class RemoteStoreClient:
    """
    Thin synchronous client for the product store REST API.
    Paths are relative to ``base_url`` (``/login``, ``/produtos``...).
    An ``http_client`` may be injected (tests pass a FastAPI TestClient or an
    httpx.Client on a MockTransport); otherwise one is built from settings.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        if http_client is None:
            http_client = httpx.Client(
                base_url=base_url or settings.API_BASE_URL,
                timeout=timeout if timeout is not None else settings.API_TIMEOUT_SECONDS,
            )
        self.http = http_client

    def close(self):
        self.http.close()

    def _request(self, method: str, path: str, payload: Optional[Dict] = None) -> httpx.Response:
        try:
            response = self.http.request(method, path, json=payload)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol, httpx.LocalProtocolError) as e:
            log.error("%s %s could not be sent: %s", method, path, e)
            raise RemoteStoreUnreachable(str(e)) from e
        except httpx.TransportError as e:
            log.error("%s %s got no response: %s", method, path, e)
            raise RemoteStoreNoResponse(str(e)) from e
        except httpx.HTTPError as e:
            log.error("%s %s failed: %s", method, path, e)
            raise RemoteStoreUnreachable(str(e)) from e

        if response.is_success:
            log.debug("%s %s -> %s", method, path, response.status_code)
            return response

        try:
            body = response.json()
        except ValueError:
            body = response.text or None
        message = _server_message(body)
        log.warning("%s %s rejected with %s: %s", method, path, response.status_code, message)
        raise RemoteStoreRejected(response.status_code, message, body)

    def _product(self, response: httpx.Response) -> Product:
        try:
            return Product.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise RemoteStoreError(f"Unexpected product payload: {e}") from e

    def login(self, codigo: str, nome: str, password: str) -> Dict:
        payload = LoginIn(codigo=codigo, nome=nome, password=password).model_dump()
        response = self._request("POST", "/login", payload)
        try:
            return response.json()
        except ValueError:
            return {}

    def list_products(self) -> List[Product]:
        response = self._request("GET", "/produtos")
        try:
            return [Product.model_validate(item) for item in response.json()]
        except (TypeError, ValueError, ValidationError) as e:
            raise RemoteStoreError(f"Unexpected product list payload: {e}") from e

    def create_product(self, data: ProductIn) -> Product:
        return self._product(self._request("POST", "/produtos", data.model_dump()))

    def update_product(self, product_id: int, data: ProductIn) -> Product:
        return self._product(self._request("PUT", f"/produtos/{product_id}", data.model_dump()))

    def delete_product(self, product_id: int) -> None:
        self._request("DELETE", f"/produtos/{product_id}")
