from sqlalchemy import Column, Float, Integer, String, Text
from treko.db import Base

class Produto(Base):
    __tablename__ = "produtos"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(256), unique=True, index=True, nullable=False)
    descricao = Column(Text, nullable=True)
    preco = Column(Float, nullable=False)

    def __repr__(self):
        return f"<Produto id={self.id} nome={self.nome}>"
