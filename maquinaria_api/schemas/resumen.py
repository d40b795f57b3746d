# maquinaria_api/schemas/resumen.py
"""
Representaciones planas (sin relaciones) de cada entidad.

Se usan para anidar unas entidades dentro de otras en las respuestas sin
crear importaciones circulares entre los módulos de schemas.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from maquinaria_api.models.empleado import RolEmpleado
from maquinaria_api.models.solicitud import EstadoSolicitud
from maquinaria_api.models.solicitud_empleado import EstadoAsignacion


class _Auditado(BaseModel):
    creado_en: Optional[datetime] = None
    actualizado_en: Optional[datetime] = None

    class Config:
        from_attributes = True


class EmpresaResumen(_Auditado):
    id: int
    nombre: str
    nit: str
    direccion: str
    telefono: str
    email: str


class RepresentanteResumen(_Auditado):
    id: int
    nombre: str
    apellido: str
    documento: str
    telefono: str
    email: str
    empresa_id: int


class EmpleadoResumen(_Auditado):
    id: int
    nombre: str
    apellido: str
    documento: str
    email: str
    direccion: str
    telefono: str
    rol: RolEmpleado


class CategoriaResumen(_Auditado):
    id: int
    nombre: str
    descripcion: Optional[str] = None


class TipoMaquinariaResumen(_Auditado):
    id: int
    nombre: str
    descripcion: Optional[str] = None
    categoria_id: int


class MantenimientoResumen(_Auditado):
    id: int
    codigo: str
    nombre: str
    descripcion: str
    costo: Decimal
    tiempo_estimado: Optional[int] = None
    manual_procedimiento: Optional[str] = None
    tipo_maquinaria_id: int


class SolicitudResumen(_Auditado):
    id: int
    codigo: str
    fecha_solicitud: date
    fecha_deseada: Optional[date] = None
    estado: EstadoSolicitud
    observaciones: Optional[str] = None
    descripcion_solicitud: Optional[str] = None
    empresa_id: int


class DetalleSolicitudResumen(_Auditado):
    id: int
    solicitud_id: int
    mantenimiento_id: int
    cantidad_maquinas: int
    costo_total: Decimal
    url_foto: Optional[str] = None


class SolicitudEmpleadoResumen(_Auditado):
    id: int
    solicitud_id: int
    empleado_id: int
    estado: EstadoAsignacion
