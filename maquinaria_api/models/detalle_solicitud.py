# maquinaria_api/models/detalle_solicitud.py
from sqlalchemy import Column, String, Integer, Numeric, ForeignKey, BigInteger
from sqlalchemy.orm import relationship
from maquinaria_api.db.base import Base, IdType, TimestampMixin


class DetalleSolicitud(TimestampMixin, Base):
    __tablename__ = "detalles_solicitud"

    id = Column(IdType, primary_key=True, autoincrement=True)
    solicitud_id = Column(BigInteger, ForeignKey("solicitudes.id", ondelete="CASCADE"), nullable=False, index=True)
    mantenimiento_id = Column(BigInteger, ForeignKey("mantenimientos.id", ondelete="CASCADE"),
                              nullable=False, index=True)
    cantidad_maquinas = Column(Integer, nullable=False)
    costo_total = Column(Numeric(15, 2, asdecimal=True), nullable=False,
                         comment="costo del mantenimiento x cantidad_maquinas")
    url_foto = Column(String(2048), nullable=True)

    solicitud = relationship("Solicitud", back_populates="detalles", lazy="joined")
    mantenimiento = relationship("Mantenimiento", back_populates="detalles", lazy="joined")
