# maquinaria_api/schemas/mantenimiento.py
from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal

from maquinaria_api.schemas.common import MAX_ID
from maquinaria_api.schemas.resumen import MantenimientoResumen, TipoMaquinariaResumen


class MantenimientoCreate(BaseModel):
    codigo: str = Field(..., min_length=1, max_length=50, examples=["MANT-001"])
    nombre: str = Field(..., min_length=1, max_length=255, examples=["Mantenimiento Preventivo Retroexcavadora"])
    descripcion: str = Field(..., min_length=1)
    costo: Decimal = Field(..., ge=0, max_digits=15, decimal_places=2, examples=[1500000])
    tiempo_estimado: Optional[int] = Field(None, ge=0, description="Horas estimadas")
    manual_procedimiento: Optional[str] = Field(None, max_length=1000)
    tipo_maquinaria_id: int = Field(..., ge=1, le=MAX_ID, examples=[1])


class MantenimientoUpdate(BaseModel):
    codigo: Optional[str] = Field(None, min_length=1, max_length=50)
    nombre: Optional[str] = Field(None, min_length=1, max_length=255)
    descripcion: Optional[str] = Field(None, min_length=1)
    costo: Optional[Decimal] = Field(None, ge=0, max_digits=15, decimal_places=2)
    tiempo_estimado: Optional[int] = Field(None, ge=0)
    manual_procedimiento: Optional[str] = Field(None, max_length=1000)
    tipo_maquinaria_id: Optional[int] = Field(None, ge=1, le=MAX_ID)


class MantenimientoRead(MantenimientoResumen):
    tipo_maquinaria: Optional[TipoMaquinariaResumen] = None
