# treko/schemas/product_schema.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ProductIn(BaseModel):
    nome: str = Field(min_length=1)
    descricao: Optional[str] = None
    preco: float = Field(gt=0)


class Product(BaseModel):
    # canonical record as returned by the store; not re-validated against input rules
    model_config = ConfigDict(from_attributes=True)
    id: int
    nome: str
    descricao: Optional[str] = None
    preco: float


class LoginIn(BaseModel):
    codigo: str
    nome: str
    password: str


def format_price(preco) -> str:
    """Two-decimal display price, e.g. ``R$ 19.90``."""
    return f"R$ {float(preco):.2f}"


def describe_product(p: Product) -> str:
    return f"#{p.id} {p.nome} - {p.descricao or 'Sem descrição'} - {format_price(p.preco)}"
