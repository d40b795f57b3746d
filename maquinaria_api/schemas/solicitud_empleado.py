# maquinaria_api/schemas/solicitud_empleado.py
from pydantic import BaseModel, Field
from typing import Optional

from maquinaria_api.schemas.common import MAX_ID
from maquinaria_api.models.solicitud_empleado import EstadoAsignacion
from maquinaria_api.schemas.resumen import EmpleadoResumen, SolicitudEmpleadoResumen
from maquinaria_api.schemas.detalle_solicitud import SolicitudConEmpresa


class SolicitudEmpleadoCreate(BaseModel):
    solicitud_id: int = Field(..., ge=1, le=MAX_ID, examples=[1])
    empleado_id: int = Field(..., ge=1, le=MAX_ID, examples=[1])
    estado: EstadoAsignacion = EstadoAsignacion.asignado


class SolicitudEmpleadoUpdate(BaseModel):
    solicitud_id: Optional[int] = Field(None, ge=1, le=MAX_ID)
    empleado_id: Optional[int] = Field(None, ge=1, le=MAX_ID)
    estado: Optional[EstadoAsignacion] = None


class SolicitudEmpleadoRead(SolicitudEmpleadoResumen):
    solicitud: Optional[SolicitudConEmpresa] = None
    empleado: Optional[EmpleadoResumen] = None
