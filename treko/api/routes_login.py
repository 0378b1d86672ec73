from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from treko.db import get_db
from treko.repositories.employee_repo import EmployeeRepository
from treko.schemas.product_schema import LoginIn
from treko.utils.log import get_logger

router = APIRouter(tags=["login"])
log = get_logger("treko.store")


@router.post("/login", summary="Employee login")
def login(payload: LoginIn, db: Session = Depends(get_db)):
    f = EmployeeRepository(db).authenticate(payload.codigo, payload.nome, payload.password)
    if not f:
        log.warning("rejected login for codigo=%s", payload.codigo)
        return JSONResponse(status_code=401, content={"message": "Credenciais inválidas."})
    return {"success": True, "funcionario": {"codigo": f.codigo, "nome": f.nome}}
