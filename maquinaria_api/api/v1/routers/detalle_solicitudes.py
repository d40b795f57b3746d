# maquinaria_api/api/v1/routers/detalle_solicitudes.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from maquinaria_api.api.dependencies import IdRegistro
from maquinaria_api.db.session import get_db
from maquinaria_api.schemas.common import MensajeRespuesta, RespuestaAPI
from maquinaria_api.schemas.detalle_solicitud import (
    DetalleSolicitudCreate,
    DetalleSolicitudRead,
    DetalleSolicitudUpdate,
)
from maquinaria_api.crud.detalle_solicitud import (
    get_detalle,
    list_detalles,
    create_detalle,
    update_detalle,
    delete_detalle,
)
from maquinaria_api.utils.logger import logger

router = APIRouter(tags=["Detalle de solicitudes"])

NO_ENCONTRADO = "Detalle de solicitud no encontrado"


@router.get("", response_model=RespuestaAPI[List[DetalleSolicitudRead]], summary="Listar detalles de solicitud")
def list_detalles_endpoint(db: Session = Depends(get_db)):
    return {"status": True, "data": list_detalles(db)}


@router.post(
    "",
    response_model=RespuestaAPI[DetalleSolicitudRead],
    status_code=status.HTTP_201_CREATED,
    summary="Agregar detalle a una solicitud",
    description="`costo_total` se calcula como el costo del mantenimiento por `cantidad_maquinas`."
)
def create_detalle_endpoint(payload: DetalleSolicitudCreate, db: Session = Depends(get_db)):
    detalle = create_detalle(db, payload)
    logger.info(
        "Detalle creado: id=%s solicitud=%s costo_total=%s",
        detalle.id, detalle.solicitud_id, detalle.costo_total
    )
    return {"status": True, "message": "Detalle de solicitud creado exitosamente", "data": detalle}


@router.get("/{detalle_id}", response_model=RespuestaAPI[DetalleSolicitudRead], summary="Obtener detalle de solicitud")
def get_detalle_endpoint(detalle_id: IdRegistro, db: Session = Depends(get_db)):
    detalle = get_detalle(db, detalle_id)
    if not detalle:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADO)
    return {"status": True, "data": detalle}


@router.put(
    "/{detalle_id}",
    response_model=RespuestaAPI[DetalleSolicitudRead],
    summary="Actualizar detalle de solicitud",
    description="Si cambia la cantidad o el mantenimiento se recalcula `costo_total`."
)
def update_detalle_endpoint(detalle_id: IdRegistro, payload: DetalleSolicitudUpdate, db: Session = Depends(get_db)):
    detalle = update_detalle(db, detalle_id, payload)
    if not detalle:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADO)

    logger.info("Detalle actualizado: %s costo_total=%s", detalle_id, detalle.costo_total)
    return {"status": True, "message": "Detalle de solicitud actualizado exitosamente", "data": detalle}


@router.delete("/{detalle_id}", response_model=MensajeRespuesta, summary="Eliminar detalle de solicitud")
def delete_detalle_endpoint(detalle_id: IdRegistro, db: Session = Depends(get_db)):
    if not delete_detalle(db, detalle_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADO)

    logger.info("Detalle eliminado: %s", detalle_id)
    return {"status": True, "message": "Detalle de solicitud eliminado exitosamente"}
