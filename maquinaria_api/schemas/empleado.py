# maquinaria_api/schemas/empleado.py
from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional

from maquinaria_api.models.empleado import RolEmpleado
from maquinaria_api.schemas.resumen import EmpleadoResumen, SolicitudEmpleadoResumen, SolicitudResumen


class EmpleadoCreate(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=255, examples=["Pedro"])
    apellido: str = Field(..., min_length=1, max_length=255, examples=["González"])
    documento: str = Field(..., min_length=1, max_length=20, examples=["1057896547"])
    email: EmailStr = Field(..., examples=["pedro@empresa.com"])
    direccion: str = Field(..., min_length=1, max_length=255, examples=["Calle 45 #67-89, Bogotá"])
    telefono: str = Field(..., min_length=1, max_length=20, examples=["300-3333333"])
    rol: RolEmpleado = RolEmpleado.empleado


class EmpleadoUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=255)
    apellido: Optional[str] = Field(None, min_length=1, max_length=255)
    documento: Optional[str] = Field(None, min_length=1, max_length=20)
    email: Optional[EmailStr] = None
    direccion: Optional[str] = Field(None, min_length=1, max_length=255)
    telefono: Optional[str] = Field(None, min_length=1, max_length=20)
    rol: Optional[RolEmpleado] = None


class AsignacionDeEmpleado(SolicitudEmpleadoResumen):
    solicitud: SolicitudResumen


class EmpleadoRead(EmpleadoResumen):
    asignaciones: List[AsignacionDeEmpleado] = []
