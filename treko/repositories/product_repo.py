from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from treko.models.product import Produto

DEMO_PRODUCTS = [
    {"nome": "Caneta", "descricao": "Caneta esferográfica azul", "preco": 2.5},
    {"nome": "Caderno", "descricao": "Caderno universitário 200 folhas", "preco": 24.9},
    {"nome": "Grampeador", "descricao": None, "preco": 38.0},
]


class DuplicateName(ValueError):
    pass


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, product_id: int) -> Optional[Produto]:
        return self.db.get(Produto, product_id)

    def list(self) -> List[Produto]:
        return self.db.query(Produto).order_by(Produto.id).all()

    def _check_name(self, nome: str, exclude_id: Optional[int] = None):
        qry = self.db.query(Produto.id).filter(func.lower(Produto.nome) == nome.lower())
        if exclude_id is not None:
            qry = qry.filter(Produto.id != exclude_id)
        if qry.first() is not None:
            raise DuplicateName("nome duplicado")

    def create(self, nome: str, preco: float, descricao: Optional[str] = None) -> Produto:
        self._check_name(nome)
        p = Produto(nome=nome, descricao=descricao, preco=preco)
        self.db.add(p)
        self.db.flush()  # assigns id
        return p

    def update(self, product_id: int, nome: str, preco: float, descricao: Optional[str] = None) -> Optional[Produto]:
        p = self.get(product_id)
        if not p:
            return None
        self._check_name(nome, exclude_id=product_id)
        p.nome = nome
        p.descricao = descricao
        p.preco = preco
        self.db.flush()
        return p

    def delete(self, product_id: int) -> bool:
        p = self.get(product_id)
        if not p:
            return False
        self.db.delete(p)
        self.db.flush()
        return True

    def ensure_demo(self, entries=None) -> int:
        """Insert missing entries by name; returns how many were created."""
        created = 0
        for ent in DEMO_PRODUCTS if entries is None else entries:
            if not self.db.query(Produto).filter(Produto.nome == ent["nome"]).first():
                self.db.add(Produto(nome=ent["nome"], descricao=ent.get("descricao"), preco=ent["preco"]))
                created += 1
        self.db.flush()
        return created
