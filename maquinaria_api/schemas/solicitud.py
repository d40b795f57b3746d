# maquinaria_api/schemas/solicitud.py
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date

from maquinaria_api.schemas.common import MAX_ID
from maquinaria_api.models.solicitud import EstadoSolicitud
from maquinaria_api.schemas.resumen import (
    DetalleSolicitudResumen,
    EmpleadoResumen,
    EmpresaResumen,
    SolicitudEmpleadoResumen,
    SolicitudResumen,
)
from maquinaria_api.schemas.mantenimiento import MantenimientoRead


class SolicitudCreate(BaseModel):
    codigo: str = Field(..., min_length=1, max_length=50, examples=["SOL-001"])
    fecha_solicitud: date = Field(..., examples=["2023-10-15"])
    fecha_deseada: Optional[date] = None
    estado: EstadoSolicitud = EstadoSolicitud.pendiente
    observaciones: Optional[str] = None
    descripcion_solicitud: Optional[str] = Field(None, max_length=500)
    empresa_id: int = Field(..., ge=1, le=MAX_ID, examples=[1])


class SolicitudUpdate(BaseModel):
    codigo: Optional[str] = Field(None, min_length=1, max_length=50)
    fecha_solicitud: Optional[date] = None
    fecha_deseada: Optional[date] = None
    estado: Optional[EstadoSolicitud] = None
    observaciones: Optional[str] = None
    descripcion_solicitud: Optional[str] = Field(None, max_length=500)
    empresa_id: Optional[int] = Field(None, ge=1, le=MAX_ID)


class DetalleDeSolicitud(DetalleSolicitudResumen):
    mantenimiento: MantenimientoRead


class AsignacionDeSolicitud(SolicitudEmpleadoResumen):
    empleado: EmpleadoResumen


class SolicitudRead(SolicitudResumen):
    empresa: Optional[EmpresaResumen] = None
    detalles: List[DetalleDeSolicitud] = []
    asignaciones: List[AsignacionDeSolicitud] = []
