# maquinaria_api/models/solicitud_empleado.py
from sqlalchemy import Column, Enum, ForeignKey, BigInteger, UniqueConstraint
from sqlalchemy.orm import relationship
from maquinaria_api.db.base import Base, IdType, TimestampMixin
import enum


class EstadoAsignacion(enum.Enum):
    asignado = "asignado"
    en_proceso = "en_proceso"
    completado = "completado"


class SolicitudEmpleado(TimestampMixin, Base):
    __tablename__ = "solicitud_empleados"
    __table_args__ = (
        UniqueConstraint("solicitud_id", "empleado_id", name="uq_solicitud_empleado"),
    )

    id = Column(IdType, primary_key=True, autoincrement=True)
    solicitud_id = Column(BigInteger, ForeignKey("solicitudes.id", ondelete="CASCADE"), nullable=False, index=True)
    empleado_id = Column(BigInteger, ForeignKey("empleados.id", ondelete="CASCADE"), nullable=False, index=True)
    estado = Column(Enum(EstadoAsignacion), nullable=False, default=EstadoAsignacion.asignado)

    solicitud = relationship("Solicitud", back_populates="asignaciones", lazy="joined")
    empleado = relationship("Empleado", back_populates="asignaciones", lazy="joined")
