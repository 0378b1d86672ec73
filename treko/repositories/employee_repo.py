from typing import Optional

from sqlalchemy.orm import Session

from treko.models.employee import Funcionario

DEMO_EMPLOYEE = {"codigo": "001", "nome": "Admin", "password": "treko123"}


class EmployeeRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_codigo(self, codigo: str) -> Optional[Funcionario]:
        return self.db.query(Funcionario).filter(Funcionario.codigo == codigo).first()

    def create(self, codigo: str, nome: str, password: str) -> Funcionario:
        f = Funcionario(codigo=codigo, nome=nome)
        f.set_password(password)
        self.db.add(f)
        self.db.flush()
        return f

    def authenticate(self, codigo: str, nome: str, password: str) -> Optional[Funcionario]:
        """Employee matching code, name (case-insensitive) and password, else None."""
        f = self.get_by_codigo(codigo)
        if not f or f.nome.strip().lower() != nome.strip().lower():
            return None
        return f if f.verify_password(password) else None

    def ensure_demo(self) -> int:
        if self.get_by_codigo(DEMO_EMPLOYEE["codigo"]):
            return 0
        self.create(**DEMO_EMPLOYEE)
        return 1
