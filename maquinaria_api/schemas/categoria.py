# maquinaria_api/schemas/categoria.py
from pydantic import BaseModel, Field
from typing import List, Optional

from maquinaria_api.schemas.resumen import CategoriaResumen, TipoMaquinariaResumen


class CategoriaCreate(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=255, examples=["Maquinaria Pesada"])
    descripcion: Optional[str] = Field(None, examples=["Equipos de construcción pesados"])


class CategoriaUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=255)
    descripcion: Optional[str] = None


class CategoriaRead(CategoriaResumen):
    tipos_maquinaria: List[TipoMaquinariaResumen] = []
