# maquinaria_api/api/v1/routers/solicitud_empleados.py
"""
Router de asignaciones de empleados a solicitudes.
Un empleado solo puede estar asignado una vez a la misma solicitud.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from maquinaria_api.api.dependencies import IdRegistro
from maquinaria_api.db.session import get_db
from maquinaria_api.schemas.common import MensajeRespuesta, RespuestaAPI
from maquinaria_api.schemas.solicitud_empleado import (
    SolicitudEmpleadoCreate,
    SolicitudEmpleadoRead,
    SolicitudEmpleadoUpdate,
)
from maquinaria_api.crud.solicitud_empleado import (
    get_asignacion,
    list_asignaciones,
    create_asignacion,
    update_asignacion,
    delete_asignacion,
)
from maquinaria_api.utils.logger import logger

router = APIRouter(tags=["Asignación de empleados"])

NO_ENCONTRADA = "Asignación no encontrada"


@router.get("", response_model=RespuestaAPI[List[SolicitudEmpleadoRead]], summary="Listar asignaciones")
def list_asignaciones_endpoint(db: Session = Depends(get_db)):
    return {"status": True, "data": list_asignaciones(db)}


@router.post(
    "",
    response_model=RespuestaAPI[SolicitudEmpleadoRead],
    status_code=status.HTTP_201_CREATED,
    summary="Asignar empleado a solicitud"
)
def create_asignacion_endpoint(payload: SolicitudEmpleadoCreate, db: Session = Depends(get_db)):
    asignacion = create_asignacion(db, payload)
    logger.info(
        "Empleado %s asignado a solicitud %s (estado=%s)",
        asignacion.empleado_id, asignacion.solicitud_id, asignacion.estado.value
    )
    return {"status": True, "message": "Empleado asignado a solicitud exitosamente", "data": asignacion}


@router.get("/{asignacion_id}", response_model=RespuestaAPI[SolicitudEmpleadoRead], summary="Obtener asignación")
def get_asignacion_endpoint(asignacion_id: IdRegistro, db: Session = Depends(get_db)):
    asignacion = get_asignacion(db, asignacion_id)
    if not asignacion:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADA)
    return {"status": True, "data": asignacion}


@router.put("/{asignacion_id}", response_model=RespuestaAPI[SolicitudEmpleadoRead], summary="Actualizar asignación")
def update_asignacion_endpoint(
    asignacion_id: IdRegistro,
    payload: SolicitudEmpleadoUpdate,
    db: Session = Depends(get_db),
):
    asignacion = update_asignacion(db, asignacion_id, payload)
    if not asignacion:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADA)

    logger.info("Asignación actualizada: %s", asignacion_id)
    return {"status": True, "message": "Asignación actualizada exitosamente", "data": asignacion}


@router.delete("/{asignacion_id}", response_model=MensajeRespuesta, summary="Eliminar asignación")
def delete_asignacion_endpoint(asignacion_id: IdRegistro, db: Session = Depends(get_db)):
    if not delete_asignacion(db, asignacion_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADA)

    logger.info("Asignación eliminada: %s", asignacion_id)
    return {"status": True, "message": "Asignación eliminada exitosamente"}
