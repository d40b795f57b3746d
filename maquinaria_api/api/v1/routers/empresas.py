# maquinaria_api/api/v1/routers/empresas.py
"""
Router para gestión de Empresas (clientes que generan solicitudes).
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from maquinaria_api.api.dependencies import IdRegistro
from maquinaria_api.db.session import get_db
from maquinaria_api.schemas.common import MensajeRespuesta, RespuestaAPI
from maquinaria_api.schemas.empresa import EmpresaCreate, EmpresaDetalle, EmpresaRead, EmpresaUpdate
from maquinaria_api.crud.empresa import (
    get_empresa,
    list_empresas,
    create_empresa,
    update_empresa,
    delete_empresa,
)
from maquinaria_api.utils.logger import logger

router = APIRouter(tags=["Empresas"])

NO_ENCONTRADA = "Empresa no encontrada"


@router.get(
    "",
    response_model=RespuestaAPI[List[EmpresaRead]],
    summary="Listar empresas",
    description="Obtiene todas las empresas con sus representantes."
)
def list_empresas_endpoint(db: Session = Depends(get_db)):
    return {"status": True, "data": list_empresas(db)}


@router.post(
    "",
    response_model=RespuestaAPI[EmpresaRead],
    status_code=status.HTTP_201_CREATED,
    summary="Crear empresa",
    description="Registra una empresa. `nit` y `email` deben ser únicos."
)
def create_empresa_endpoint(payload: EmpresaCreate, db: Session = Depends(get_db)):
    empresa = create_empresa(db, payload)
    logger.info("Empresa creada: id=%s nit=%s", empresa.id, empresa.nit)
    return {"status": True, "message": "Empresa creada exitosamente", "data": empresa}


@router.get(
    "/{empresa_id}",
    response_model=RespuestaAPI[EmpresaDetalle],
    summary="Obtener empresa por ID",
    description="Incluye representantes y solicitudes de la empresa."
)
def get_empresa_endpoint(empresa_id: IdRegistro, db: Session = Depends(get_db)):
    empresa = get_empresa(db, empresa_id)
    if not empresa:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADA)
    return {"status": True, "data": empresa}


@router.put(
    "/{empresa_id}",
    response_model=RespuestaAPI[EmpresaRead],
    summary="Actualizar empresa",
    description="Actualización parcial: solo se modifican los campos enviados."
)
def update_empresa_endpoint(empresa_id: IdRegistro, payload: EmpresaUpdate, db: Session = Depends(get_db)):
    empresa = update_empresa(db, empresa_id, payload)
    if not empresa:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADA)

    logger.info("Empresa actualizada: %s", empresa_id)
    return {"status": True, "message": "Empresa actualizada exitosamente", "data": empresa}


@router.delete(
    "/{empresa_id}",
    response_model=MensajeRespuesta,
    summary="Eliminar empresa",
    description="Elimina la empresa junto con sus representantes y solicitudes."
)
def delete_empresa_endpoint(empresa_id: IdRegistro, db: Session = Depends(get_db)):
    if not delete_empresa(db, empresa_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_ENCONTRADA)

    logger.info("Empresa eliminada: %s", empresa_id)
    return {"status": True, "message": "Empresa eliminada exitosamente"}
