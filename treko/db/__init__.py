import importlib

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from treko.config import settings
from treko.utils.log import get_logger

log = get_logger("treko.store")

DATABASE_URL = settings.STORE_DATABASE_URL


def _engine_for(url: str):
    kwargs = {"future": True, "echo": False}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every session sees its own empty database
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


engine = _engine_for(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

MODEL_MODULES = [
    "treko.models.product",
    "treko.models.employee",
]


def init_db(reset: bool = False, seed: bool = False):
    """
    Create the store schema.

    Args:
        reset: drop every table first (tests and ``seed_store.py --reset``).
        seed: make sure the demo employee and products exist (idempotent).
    """
    for mod in MODEL_MODULES:
        importlib.import_module(mod)

    if reset:
        log.info("resetting store database %s", DATABASE_URL)
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    if seed:
        from treko.repositories.employee_repo import EmployeeRepository
        from treko.repositories.product_repo import ProductRepository

        s = SessionLocal()
        try:
            created = EmployeeRepository(s).ensure_demo() + ProductRepository(s).ensure_demo()
            s.commit()
            if created:
                log.info("seeded %d demo rows", created)
        finally:
            s.close()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
