# maquinaria_api/models/empresa.py
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from maquinaria_api.db.base import Base, IdType, TimestampMixin


class Empresa(TimestampMixin, Base):
    __tablename__ = "empresas"

    id = Column(IdType, primary_key=True, autoincrement=True)
    nombre = Column(String(255), nullable=False)
    nit = Column(String(20), nullable=False, unique=True)
    direccion = Column(String(255), nullable=False)
    telefono = Column(String(20), nullable=False)
    email = Column(String(255), nullable=False, unique=True)

    # Relaciones
    representantes = relationship("Representante", back_populates="empresa",
                                  cascade="all, delete-orphan", lazy="selectin")
    solicitudes = relationship("Solicitud", back_populates="empresa",
                               cascade="all, delete-orphan")
