# maquinaria_api/api/v1/routers/empleados.py
"""
Router para gestión de Empleados (personal asignable a solicitudes).
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from maquinaria_api.api.dependencies import IdRegistro
from maquinaria_api.db.session import get_db
from maquinaria_api.schemas.common import MensajeRespuesta, RespuestaAPI
from maquinaria_api.schemas.empleado import EmpleadoCreate, EmpleadoRead, EmpleadoUpdate
from maquinaria_api.crud.empleado import (
    get_empleado,
    list_empleados,
    create_empleado,
    update_empleado,
    delete_empleado,
)
from maquinaria_api.utils.logger import logger

router = APIRouter(tags=["Empleados"])

NO_ENCONTRADO = "Empleado no encontrado"


@router.get(
    "",
    response_model=RespuestaAPI[List[EmpleadoRead]],
    summary="Listar empleados",
    description="Obtiene los empleados con las solicitudes que tienen asignadas."
)
def list_empleados_endpoint(db: Session = Depends(get_db)):
    return {"status": True, "data": list_empleados(db)}


@router.post(
    "",
    response_model=RespuestaAPI[EmpleadoRead],
    status_code=status.HTTP_201_CREATED,
    summary="Crear empleado",
    description="`documento` y `email` deben ser únicos. `rol` por defecto: empleado."
)
def create_empleado_endpoint(payload: EmpleadoCreate, db: Session = Depends(get_db)):
    empleado = create_empleado(db, payload)
    logger.info("Empleado creado: id=%s documento=%s", empleado.id, empleado.documento)
    return {"status": True, "message": "Empleado creado exitosamente", "data": empleado}


@router.get("/{empleado_id}", response_model=RespuestaAPI[EmpleadoRead], summary="Obtener empleado por ID")
def get_empleado_endpoint(empleado_id: IdRegistro, db: Session = Depends(get_db)):
    empleado = get_empleado(db, empleado_id)
    if not empleado:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADO)
    return {"status": True, "data": empleado}


@router.put("/{empleado_id}", response_model=RespuestaAPI[EmpleadoRead], summary="Actualizar empleado")
def update_empleado_endpoint(empleado_id: IdRegistro, payload: EmpleadoUpdate, db: Session = Depends(get_db)):
    empleado = update_empleado(db, empleado_id, payload)
    if not empleado:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADO)

    logger.info("Empleado actualizado: %s", empleado_id)
    return {"status": True, "message": "Empleado actualizado exitosamente", "data": empleado}


@router.delete("/{empleado_id}", response_model=MensajeRespuesta, summary="Eliminar empleado")
def delete_empleado_endpoint(empleado_id: IdRegistro, db: Session = Depends(get_db)):
    if not delete_empleado(db, empleado_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADO)

    logger.info("Empleado eliminado: %s", empleado_id)
    return {"status": True, "message": "Empleado eliminado exitosamente"}
