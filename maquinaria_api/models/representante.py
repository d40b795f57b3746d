# maquinaria_api/models/representante.py
from sqlalchemy import Column, String, ForeignKey, BigInteger
from sqlalchemy.orm import relationship
from maquinaria_api.db.base import Base, IdType, TimestampMixin


class Representante(TimestampMixin, Base):
    __tablename__ = "representantes"

    id = Column(IdType, primary_key=True, autoincrement=True)
    nombre = Column(String(255), nullable=False)
    apellido = Column(String(255), nullable=False)
    documento = Column(String(20), nullable=False, unique=True)
    telefono = Column(String(20), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    empresa_id = Column(BigInteger, ForeignKey("empresas.id", ondelete="CASCADE"), nullable=False, index=True)

    empresa = relationship("Empresa", back_populates="representantes", lazy="joined")
