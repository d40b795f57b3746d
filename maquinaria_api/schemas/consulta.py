# maquinaria_api/schemas/consulta.py
"""Schemas de salida de las consultas de reportes (/api/consultas)."""
from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal

from maquinaria_api.models.solicitud_empleado import EstadoAsignacion
from maquinaria_api.schemas.resumen import EmpresaResumen, RepresentanteResumen, SolicitudResumen


class EmpleadoOrdenado(BaseModel):
    nombre: str
    apellido: str
    documento: str
    email: str
    telefono: str

    class Config:
        from_attributes = True


class MaquinariaCostosa(BaseModel):
    tipo_maquinaria: str
    categoria: str
    codigo: str
    mantenimiento: str
    costo: Decimal


class EmpresaConTotal(EmpresaResumen):
    total_solicitudes: int


class TotalMaquinasEmpresa(BaseModel):
    total_maquinas: int
    empresa: str


class SolicitudDeEmpleado(SolicitudResumen):
    empresa: Optional[EmpresaResumen] = None
    estado_asignacion: EstadoAsignacion


class RepresentanteSinSolicitudes(RepresentanteResumen):
    empresa_nombre: str


class FilaListadoSolicitudes(BaseModel):
    empresa: str
    codigo_solicitud: str
    mantenimiento: str
    cantidad_maquinas: int
    costo_total: Decimal


class BusquedaPorCodigo(BaseModel):
    codigo: str = Field(..., min_length=1, examples=["SOL-001"])



class CantidadMantenimientosTipo(BaseModel):
    cantidad_mantenimientos: int
    tipo_maquinaria: str


class FilaSolicitudMes(BaseModel):
    empresa: str
    maquinaria: str
    codigo: str
    mantenimiento: str
    cantidad_maquinas: int
