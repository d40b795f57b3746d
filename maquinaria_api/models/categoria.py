# maquinaria_api/models/categoria.py
from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from maquinaria_api.db.base import Base, IdType, TimestampMixin


class Categoria(TimestampMixin, Base):
    __tablename__ = "categorias_maquinaria"

    id = Column(IdType, primary_key=True, autoincrement=True)
    nombre = Column(String(255), nullable=False)
    descripcion = Column(Text, nullable=True)

    tipos_maquinaria = relationship("TipoMaquinaria", back_populates="categoria",
                                    cascade="all, delete-orphan", lazy="selectin")
