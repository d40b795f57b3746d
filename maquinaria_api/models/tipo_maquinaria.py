# maquinaria_api/models/tipo_maquinaria.py
from sqlalchemy import Column, String, Text, ForeignKey, BigInteger
from sqlalchemy.orm import relationship
from maquinaria_api.db.base import Base, IdType, TimestampMixin


class TipoMaquinaria(TimestampMixin, Base):
    __tablename__ = "tipos_maquinaria"

    id = Column(IdType, primary_key=True, autoincrement=True)
    nombre = Column(String(255), nullable=False)
    descripcion = Column(Text, nullable=True)
    categoria_id = Column(BigInteger, ForeignKey("categorias_maquinaria.id", ondelete="CASCADE"),
                          nullable=False, index=True)

    categoria = relationship("Categoria", back_populates="tipos_maquinaria", lazy="joined")
    mantenimientos = relationship("Mantenimiento", back_populates="tipo_maquinaria",
                                  cascade="all, delete-orphan", lazy="selectin")
