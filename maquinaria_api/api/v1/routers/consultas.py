# maquinaria_api/api/v1/routers/consultas.py
"""
Consultas de reportes (solo lectura).

Los parámetros tienen como valor por defecto el caso de uso histórico de
cada reporte (Argos, retroexcavadoras, octubre de 2023...), que además
sigue disponible en su ruta histórica.
"""
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from maquinaria_api.db.session import get_db
from maquinaria_api.crud.solicitud import get_solicitud_by_codigo
from maquinaria_api.schemas.common import RespuestaAPI
from maquinaria_api.schemas.consulta import (
    BusquedaPorCodigo,
    CantidadMantenimientosTipo,
    EmpleadoOrdenado,
    EmpresaConTotal,
    FilaListadoSolicitudes,
    FilaSolicitudMes,
    MaquinariaCostosa,
    RepresentanteSinSolicitudes,
    SolicitudDeEmpleado,
    TotalMaquinasEmpresa,
)
from maquinaria_api.schemas.solicitud import SolicitudRead
from maquinaria_api.services import consultas
from maquinaria_api.utils.logger import logger

router = APIRouter(tags=["Consultas"])


@router.get(
    "/empleados-ordenados",
    response_model=RespuestaAPI[List[EmpleadoOrdenado]],
    summary="Empleados ordenados por apellido"
)
def empleados_ordenados(db: Session = Depends(get_db)):
    return {"status": True, "data": consultas.empleados_ordenados(db)}


@router.get(
    "/maquinaria-pesada-costosa",
    response_model=RespuestaAPI[List[MaquinariaCostosa]],
    summary="Mantenimientos costosos por categoría",
    description="Mantenimientos cuyo costo supera `umbral` en categorías cuyo nombre contiene `categoria`."
)
def maquinaria_pesada_costosa(
    umbral: Decimal = Query(consultas.UMBRAL_COSTO_DEFECTO, ge=0),
    categoria: str = Query("Pesada", min_length=1),
    db: Session = Depends(get_db),
):
    return {"status": True, "data": consultas.maquinaria_costosa(db, umbral=umbral, categoria=categoria)}


@router.get(
    "/empresa-mas-solicitudes",
    response_model=RespuestaAPI[Optional[EmpresaConTotal]],
    summary="Empresa con más solicitudes"
)
def empresa_mas_solicitudes(db: Session = Depends(get_db)):
    return {"status": True, "data": consultas.empresa_con_mas_solicitudes(db)}


@router.get(
    "/maquinas-empresa",
    response_model=RespuestaAPI[TotalMaquinasEmpresa],
    summary="Total de máquinas solicitadas por una empresa"
)
@router.get("/maquinas-argos", response_model=RespuestaAPI[TotalMaquinasEmpresa], include_in_schema=False)
def maquinas_empresa(nombre: str = Query("Argos", min_length=1), db: Session = Depends(get_db)):
    return {"status": True, "data": consultas.total_maquinas_empresa(db, nombre)}


@router.get(
    "/solicitudes-empleado",
    response_model=RespuestaAPI[List[SolicitudDeEmpleado]],
    summary="Solicitudes asignadas a un empleado"
)
def solicitudes_empleado(documento: str = Query("1057896547", min_length=1), db: Session = Depends(get_db)):
    return {"status": True, "data": consultas.solicitudes_de_empleado(db, documento)}


@router.get(
    "/representantes-sin-solicitudes",
    response_model=RespuestaAPI[List[RepresentanteSinSolicitudes]],
    summary="Representantes de empresas sin solicitudes"
)
def representantes_sin_solicitudes(db: Session = Depends(get_db)):
    return {"status": True, "data": consultas.representantes_sin_solicitudes(db)}


@router.get(
    "/listado-solicitudes",
    response_model=RespuestaAPI[List[FilaListadoSolicitudes]],
    summary="Listado de solicitudes con sus mantenimientos"
)
def listado_solicitudes(db: Session = Depends(get_db)):
    return {"status": True, "data": consultas.listado_solicitudes(db)}


@router.post(
    "/solicitud-por-codigo",
    response_model=RespuestaAPI[SolicitudRead],
    summary="Buscar solicitud por código"
)
def solicitud_por_codigo(payload: BusquedaPorCodigo, db: Session = Depends(get_db)):
    solicitud = get_solicitud_by_codigo(db, payload.codigo)
    if not solicitud:
        logger.info("Búsqueda sin resultados para código %s", payload.codigo)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Solicitud no encontrada")
    return {"status": True, "data": solicitud}


@router.get(
    "/mantenimientos-tipo",
    response_model=RespuestaAPI[CantidadMantenimientosTipo],
    summary="Cantidad de mantenimientos solicitados por tipo de maquinaria"
)
@router.get(
    "/mantenimientos-retroexcavadoras",
    response_model=RespuestaAPI[CantidadMantenimientosTipo],
    include_in_schema=False
)
def mantenimientos_tipo(tipo: str = Query("retroexcavadora", min_length=1), db: Session = Depends(get_db)):
    return {"status": True, "data": consultas.mantenimientos_por_tipo(db, tipo)}


@router.get(
    "/solicitudes-mes",
    response_model=RespuestaAPI[List[FilaSolicitudMes]],
    summary="Solicitudes de un mes calendario"
)
@router.get("/solicitudes-octubre-2023", response_model=RespuestaAPI[List[FilaSolicitudMes]], include_in_schema=False)
def solicitudes_mes(
    anio: int = Query(2023, ge=1900, le=9999),
    mes: int = Query(10, ge=1, le=12),
    db: Session = Depends(get_db),
):
    return {"status": True, "data": consultas.solicitudes_del_mes(db, anio, mes)}
