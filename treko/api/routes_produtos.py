from typing import List

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from treko.db import get_db
from treko.repositories.product_repo import DuplicateName, ProductRepository
from treko.schemas.product_schema import Product, ProductIn

router = APIRouter(prefix="/produtos", tags=["produtos"])

NOT_FOUND = "Produto não encontrado"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("", response_model=List[Product], summary="List products")
def list_produtos(db: Session = Depends(get_db)):
    return [Product.model_validate(p) for p in ProductRepository(db).list()]


@router.post("", response_model=Product, status_code=201, summary="Create product")
def create_produto(payload: ProductIn, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    try:
        p = repo.create(nome=payload.nome, descricao=payload.descricao, preco=payload.preco)
    except DuplicateName as e:
        db.rollback()
        return _error(400, str(e))
    db.commit()
    return Product.model_validate(p)


@router.put("/{product_id}", response_model=Product, summary="Update product")
def update_produto(product_id: int, payload: ProductIn, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    try:
        p = repo.update(product_id, nome=payload.nome, descricao=payload.descricao, preco=payload.preco)
    except DuplicateName as e:
        db.rollback()
        return _error(400, str(e))
    if not p:
        return _error(404, NOT_FOUND)
    db.commit()
    return Product.model_validate(p)


@router.delete("/{product_id}", status_code=204, summary="Delete product")
def delete_produto(product_id: int, db: Session = Depends(get_db)):
    if not ProductRepository(db).delete(product_id):
        return _error(404, NOT_FOUND)
    db.commit()
    return Response(status_code=204)
