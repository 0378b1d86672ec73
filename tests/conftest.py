import os

# in-memory store, no demo rows unless a test seeds them; must be set before treko.config is imported
os.environ["STORE_DATABASE_URL"] = "sqlite://"
os.environ["STORE_SEED_DEMO"] = "false"

import httpx
import pytest
from fastapi.testclient import TestClient

from treko.adapters.remote_store import RemoteStoreClient
from treko.db import SessionLocal, init_db
from treko.main import app
from treko.repositories.employee_repo import EmployeeRepository
from treko.repositories.product_repo import ProductRepository


@pytest.fixture
def store():
    """Fresh development store with one employee and the demo products."""
    init_db(reset=True)
    db = SessionLocal()
    try:
        EmployeeRepository(db).create(codigo="42", nome="Maria", password="segredo")
        ProductRepository(db).ensure_demo()
        db.commit()
    finally:
        db.close()
    return TestClient(app)


@pytest.fixture
def store_client(store):
    """RemoteStoreClient talking to the in-process development store."""
    return RemoteStoreClient(http_client=TestClient(app, base_url="http://testserver/api"))


@pytest.fixture
def scripted():
    """
    Build a RemoteStoreClient on an httpx.MockTransport.

        client, calls = scripted(handler)

    ``handler(request)`` returns an httpx.Response (or raises an httpx error);
    ``calls`` collects every request that reached the transport.
    """

    def build(handler):
        calls = []

        def transport(request: httpx.Request):
            calls.append(request)
            return handler(request)

        http = httpx.Client(base_url="http://store.test/api", transport=httpx.MockTransport(transport))
        return RemoteStoreClient(http_client=http), calls

    return build
