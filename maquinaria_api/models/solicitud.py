# maquinaria_api/models/solicitud.py
from sqlalchemy import Column, String, Text, Date, Enum, ForeignKey, BigInteger
from sqlalchemy.orm import relationship
from maquinaria_api.db.base import Base, IdType, TimestampMixin
import enum


class EstadoSolicitud(enum.Enum):
    pendiente = "pendiente"
    en_proceso = "en_proceso"
    completada = "completada"
    cancelada = "cancelada"


class Solicitud(TimestampMixin, Base):
    __tablename__ = "solicitudes"

    id = Column(IdType, primary_key=True, autoincrement=True)
    codigo = Column(String(50), nullable=False, unique=True)
    fecha_solicitud = Column(Date, nullable=False, index=True)
    fecha_deseada = Column(Date, nullable=True)
    estado = Column(Enum(EstadoSolicitud), nullable=False, default=EstadoSolicitud.pendiente)
    observaciones = Column(Text, nullable=True)
    descripcion_solicitud = Column(String(500), nullable=True)
    empresa_id = Column(BigInteger, ForeignKey("empresas.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relaciones
    empresa = relationship("Empresa", back_populates="solicitudes", lazy="joined")
    detalles = relationship("DetalleSolicitud", back_populates="solicitud",
                            cascade="all, delete-orphan", lazy="selectin")
    asignaciones = relationship("SolicitudEmpleado", back_populates="solicitud",
                                cascade="all, delete-orphan", lazy="selectin")
    empleados = relationship("Empleado", secondary="solicitud_empleados", viewonly=True)
