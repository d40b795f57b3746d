# maquinaria_api/schemas/empresa.py
from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional

from maquinaria_api.schemas.resumen import EmpresaResumen, RepresentanteResumen, SolicitudResumen


class EmpresaCreate(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=255, examples=["Constructora XYZ"])
    nit: str = Field(..., min_length=1, max_length=20, examples=["900123456-7"])
    direccion: str = Field(..., min_length=1, max_length=255, examples=["Calle 123 #45-67"])
    telefono: str = Field(..., min_length=1, max_length=20, examples=["3001234567"])
    email: EmailStr = Field(..., examples=["contacto@xyz.com"])


class EmpresaUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=255)
    nit: Optional[str] = Field(None, min_length=1, max_length=20)
    direccion: Optional[str] = Field(None, min_length=1, max_length=255)
    telefono: Optional[str] = Field(None, min_length=1, max_length=20)
    email: Optional[EmailStr] = None


class EmpresaRead(EmpresaResumen):
    representantes: List[RepresentanteResumen] = []


class EmpresaDetalle(EmpresaRead):
    solicitudes: List[SolicitudResumen] = []
