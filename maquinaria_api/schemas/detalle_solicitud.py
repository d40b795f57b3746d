# maquinaria_api/schemas/detalle_solicitud.py
from pydantic import BaseModel, Field
from typing import Optional

from maquinaria_api.schemas.common import MAX_ID
from maquinaria_api.schemas.resumen import (
    DetalleSolicitudResumen,
    EmpresaResumen,
    MantenimientoResumen,
    SolicitudResumen,
)

MAX_CANTIDAD_MAQUINAS = 10000


class DetalleSolicitudCreate(BaseModel):
    """costo_total no se recibe: se calcula como costo del mantenimiento x cantidad"""
    solicitud_id: int = Field(..., ge=1, le=MAX_ID, examples=[1])
    mantenimiento_id: int = Field(..., ge=1, le=MAX_ID, examples=[1])
    cantidad_maquinas: int = Field(..., ge=1, le=MAX_CANTIDAD_MAQUINAS, examples=[2])
    url_foto: Optional[str] = Field(None, max_length=2048, examples=["https://cdn.example.com/fotos/retro-01.jpg"])


class DetalleSolicitudUpdate(BaseModel):
    solicitud_id: Optional[int] = Field(None, ge=1, le=MAX_ID)
    mantenimiento_id: Optional[int] = Field(None, ge=1, le=MAX_ID)
    cantidad_maquinas: Optional[int] = Field(None, ge=1, le=MAX_CANTIDAD_MAQUINAS)
    url_foto: Optional[str] = Field(None, max_length=2048)


class SolicitudConEmpresa(SolicitudResumen):
    empresa: Optional[EmpresaResumen] = None


class DetalleSolicitudRead(DetalleSolicitudResumen):
    solicitud: Optional[SolicitudConEmpresa] = None
    mantenimiento: Optional[MantenimientoResumen] = None
