# maquinaria_api/api/v1/routers/dashboard.py
"""
Resúmenes para la vista principal: totales generales, distribución de
solicitudes por estado y empresas con más solicitudes.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from maquinaria_api.db.session import get_db
from maquinaria_api.models.empleado import Empleado
from maquinaria_api.models.empresa import Empresa
from maquinaria_api.models.mantenimiento import Mantenimiento
from maquinaria_api.models.solicitud import EstadoSolicitud, Solicitud
from maquinaria_api.schemas.common import RespuestaAPI
from maquinaria_api.schemas.dashboard import EstadisticasGenerales, SolicitudesPorEstado, TopEmpresa

router = APIRouter(tags=["Dashboard"])

TOP_EMPRESAS = 5


def _contar_por_estado(db: Session):
    rows = (
        db.query(Solicitud.estado, func.count(Solicitud.id))
        .group_by(Solicitud.estado)
        .all()
    )
    return {estado: total for estado, total in rows}


@router.get("/stats", response_model=RespuestaAPI[EstadisticasGenerales], summary="Estadísticas generales")
def stats(db: Session = Depends(get_db)):
    por_estado = _contar_por_estado(db)
    estadisticas = EstadisticasGenerales(
        total_empresas=db.query(func.count(Empresa.id)).scalar() or 0,
        total_solicitudes=db.query(func.count(Solicitud.id)).scalar() or 0,
        total_empleados=db.query(func.count(Empleado.id)).scalar() or 0,
        total_mantenimientos=db.query(func.count(Mantenimiento.id)).scalar() or 0,
        solicitudes_pendientes=por_estado.get(EstadoSolicitud.pendiente, 0),
        solicitudes_en_proceso=por_estado.get(EstadoSolicitud.en_proceso, 0),
        solicitudes_completadas=por_estado.get(EstadoSolicitud.completada, 0),
    )
    return {"status": True, "data": estadisticas}


@router.get(
    "/solicitudes-por-estado",
    response_model=RespuestaAPI[List[SolicitudesPorEstado]],
    summary="Solicitudes agrupadas por estado"
)
def solicitudes_por_estado(db: Session = Depends(get_db)):
    por_estado = _contar_por_estado(db)
    data = [
        SolicitudesPorEstado(estado=estado.value, total=por_estado[estado])
        for estado in EstadoSolicitud
        if estado in por_estado
    ]
    return {"status": True, "data": data}


@router.get(
    "/top-empresas",
    response_model=RespuestaAPI[List[TopEmpresa]],
    summary="Empresas con más solicitudes"
)
def top_empresas(db: Session = Depends(get_db)):
    total = func.count(Solicitud.id).label("total_solicitudes")
    rows = (
        db.query(Empresa.nombre, total)
        .join(Solicitud, Solicitud.empresa_id == Empresa.id)
        .group_by(Empresa.id, Empresa.nombre)
        .order_by(total.desc(), Empresa.id.asc())
        .limit(TOP_EMPRESAS)
        .all()
    )
    data = [TopEmpresa(nombre=nombre, total_solicitudes=cantidad) for nombre, cantidad in rows]
    return {"status": True, "data": data}
