# maquinaria_api/schemas/dashboard.py
from pydantic import BaseModel, Field


class EstadisticasGenerales(BaseModel):
    total_empresas: int = Field(description="Empresas registradas")
    total_solicitudes: int = Field(description="Solicitudes registradas")
    total_empleados: int = Field(description="Empleados registrados")
    total_mantenimientos: int = Field(description="Mantenimientos definidos")
    solicitudes_pendientes: int
    solicitudes_en_proceso: int
    solicitudes_completadas: int


class SolicitudesPorEstado(BaseModel):
    estado: str
    total: int


class TopEmpresa(BaseModel):
    nombre: str
    total_solicitudes: int
