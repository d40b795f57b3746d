# maquinaria_api/schemas/representante.py
from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from maquinaria_api.schemas.common import MAX_ID
from maquinaria_api.schemas.resumen import EmpresaResumen, RepresentanteResumen


class RepresentanteCreate(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=255, examples=["Juan"])
    apellido: str = Field(..., min_length=1, max_length=255, examples=["Pérez"])
    documento: str = Field(..., min_length=1, max_length=20, examples=["12345678"])
    telefono: str = Field(..., min_length=1, max_length=20, examples=["3001234567"])
    email: EmailStr = Field(..., examples=["juan@example.com"])
    empresa_id: int = Field(..., ge=1, le=MAX_ID, examples=[1])


class RepresentanteUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=255)
    apellido: Optional[str] = Field(None, min_length=1, max_length=255)
    documento: Optional[str] = Field(None, min_length=1, max_length=20)
    telefono: Optional[str] = Field(None, min_length=1, max_length=20)
    email: Optional[EmailStr] = None
    empresa_id: Optional[int] = Field(None, ge=1, le=MAX_ID)


class RepresentanteRead(RepresentanteResumen):
    empresa: Optional[EmpresaResumen] = None
