import bcrypt
from sqlalchemy import Column, Integer, String
from treko.db import Base

# bcrypt only looks at the first 72 bytes; recent releases raise instead of truncating
BCRYPT_MAX_BYTES = 72


def _secret(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class Funcionario(Base):
    __tablename__ = "funcionarios"

    id = Column(Integer, primary_key=True, index=True)
    codigo = Column(String(64), unique=True, index=True, nullable=False)
    nome = Column(String(256), nullable=False)
    hashed_password = Column(String(255), nullable=False)

    def set_password(self, password: str):
        self.hashed_password = bcrypt.hashpw(_secret(password), bcrypt.gensalt()).decode("utf-8")

    def verify_password(self, password: str) -> bool:
        if not self.hashed_password:
            return False
        try:
            return bcrypt.checkpw(_secret(password), self.hashed_password.encode("utf-8"))
        except ValueError:
            # not a bcrypt hash
            return False

    def __repr__(self):
        return f"<Funcionario codigo={self.codigo} nome={self.nome}>"
