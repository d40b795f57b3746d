# maquinaria_api/api/v1/routers/solicitudes.py
"""
Router para gestión de Solicitudes de mantenimiento.
Cada solicitud se devuelve con su empresa, sus detalles (con el
mantenimiento y su tipo) y los empleados asignados.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from maquinaria_api.api.dependencies import IdRegistro
from maquinaria_api.db.session import get_db
from maquinaria_api.schemas.common import MensajeRespuesta, RespuestaAPI
from maquinaria_api.schemas.solicitud import SolicitudCreate, SolicitudRead, SolicitudUpdate
from maquinaria_api.crud.solicitud import (
    get_solicitud,
    list_solicitudes,
    create_solicitud,
    update_solicitud,
    delete_solicitud,
)
from maquinaria_api.utils.logger import logger

router = APIRouter(tags=["Solicitudes"])

NO_ENCONTRADA = "Solicitud no encontrada"


@router.get("", response_model=RespuestaAPI[List[SolicitudRead]], summary="Listar solicitudes")
def list_solicitudes_endpoint(db: Session = Depends(get_db)):
    return {"status": True, "data": list_solicitudes(db)}


@router.post(
    "",
    response_model=RespuestaAPI[SolicitudRead],
    status_code=status.HTTP_201_CREATED,
    summary="Crear solicitud",
    description="`codigo` debe ser único. `estado` por defecto: pendiente."
)
def create_solicitud_endpoint(payload: SolicitudCreate, db: Session = Depends(get_db)):
    solicitud = create_solicitud(db, payload)
    logger.info("Solicitud creada: id=%s codigo=%s empresa=%s", solicitud.id, solicitud.codigo, solicitud.empresa_id)
    return {"status": True, "message": "Solicitud creada exitosamente", "data": solicitud}


@router.get("/{solicitud_id}", response_model=RespuestaAPI[SolicitudRead], summary="Obtener solicitud")
def get_solicitud_endpoint(solicitud_id: IdRegistro, db: Session = Depends(get_db)):
    solicitud = get_solicitud(db, solicitud_id)
    if not solicitud:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADA)
    return {"status": True, "data": solicitud}


@router.put("/{solicitud_id}", response_model=RespuestaAPI[SolicitudRead], summary="Actualizar solicitud")
def update_solicitud_endpoint(solicitud_id: IdRegistro, payload: SolicitudUpdate, db: Session = Depends(get_db)):
    solicitud = update_solicitud(db, solicitud_id, payload)
    if not solicitud:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADA)

    logger.info("Solicitud actualizada: %s estado=%s", solicitud_id, solicitud.estado.value)
    return {"status": True, "message": "Solicitud actualizada exitosamente", "data": solicitud}


@router.delete(
    "/{solicitud_id}",
    response_model=MensajeRespuesta,
    summary="Eliminar solicitud",
    description="Elimina la solicitud junto con sus detalles y asignaciones."
)
def delete_solicitud_endpoint(solicitud_id: IdRegistro, db: Session = Depends(get_db)):
    if not delete_solicitud(db, solicitud_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADA)

    logger.info("Solicitud eliminada: %s", solicitud_id)
    return {"status": True, "message": "Solicitud eliminada exitosamente"}
