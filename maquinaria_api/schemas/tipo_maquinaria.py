# maquinaria_api/schemas/tipo_maquinaria.py
from pydantic import BaseModel, Field
from typing import List, Optional

from maquinaria_api.schemas.common import MAX_ID
from maquinaria_api.schemas.resumen import CategoriaResumen, MantenimientoResumen, TipoMaquinariaResumen


class TipoMaquinariaCreate(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=255, examples=["Retroexcavadora"])
    descripcion: Optional[str] = Field(None, examples=["Equipo para excavación y carga"])
    categoria_id: int = Field(..., ge=1, le=MAX_ID, examples=[1])


class TipoMaquinariaUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=255)
    descripcion: Optional[str] = None
    categoria_id: Optional[int] = Field(None, ge=1, le=MAX_ID)


class TipoMaquinariaRead(TipoMaquinariaResumen):
    categoria: Optional[CategoriaResumen] = None
    mantenimientos: List[MantenimientoResumen] = []
