# maquinaria_api/models/empleado.py
from sqlalchemy import Column, String, Enum
from sqlalchemy.orm import relationship
from maquinaria_api.db.base import Base, IdType, TimestampMixin
import enum


class RolEmpleado(enum.Enum):
    admin = "admin"
    empleado = "empleado"
    supervisor = "supervisor"


class Empleado(TimestampMixin, Base):
    __tablename__ = "empleados"

    id = Column(IdType, primary_key=True, autoincrement=True)
    nombre = Column(String(255), nullable=False)
    apellido = Column(String(255), nullable=False, index=True)
    documento = Column(String(20), nullable=False, unique=True)
    email = Column(String(255), nullable=False, unique=True)
    direccion = Column(String(255), nullable=False)
    telefono = Column(String(20), nullable=False)
    rol = Column(Enum(RolEmpleado), nullable=False, default=RolEmpleado.empleado)

    # Asignaciones a solicitudes (tabla intermedia con estado propio)
    asignaciones = relationship("SolicitudEmpleado", back_populates="empleado",
                                cascade="all, delete-orphan")
    solicitudes = relationship("Solicitud", secondary="solicitud_empleados", viewonly=True)
