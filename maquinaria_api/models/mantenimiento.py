# maquinaria_api/models/mantenimiento.py
from sqlalchemy import Column, String, Text, Integer, Numeric, ForeignKey, BigInteger
from sqlalchemy.orm import relationship
from maquinaria_api.db.base import Base, IdType, TimestampMixin


class Mantenimiento(TimestampMixin, Base):
    __tablename__ = "mantenimientos"

    id = Column(IdType, primary_key=True, autoincrement=True)
    codigo = Column(String(50), nullable=False, unique=True)
    nombre = Column(String(255), nullable=False)
    descripcion = Column(Text, nullable=False)
    costo = Column(Numeric(15, 2, asdecimal=True), nullable=False)
    tiempo_estimado = Column(Integer, nullable=True, comment="Tiempo estimado en horas")
    manual_procedimiento = Column(Text, nullable=True)
    tipo_maquinaria_id = Column(BigInteger, ForeignKey("tipos_maquinaria.id", ondelete="CASCADE"),
                                nullable=False, index=True)

    tipo_maquinaria = relationship("TipoMaquinaria", back_populates="mantenimientos", lazy="joined")
    detalles = relationship("DetalleSolicitud", back_populates="mantenimiento",
                            cascade="all, delete-orphan")
