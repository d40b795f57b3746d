from sqlalchemy.orm import Session
from typing import List, Optional

from maquinaria_api.models.empresa import Empresa
from maquinaria_api.models.solicitud import Solicitud
from maquinaria_api.schemas.solicitud import SolicitudCreate, SolicitudUpdate
from maquinaria_api.crud.base import (
    aplicar_cambios,
    eliminar,
    errores_llaves_foraneas,
    errores_obligatorios,
    errores_unicidad,
    guardar,
    validar,
)

CAMPOS_UNICOS = ("codigo",)
REFERENCIAS = {"empresa_id": Empresa}


def get_solicitud(db: Session, solicitud_id: int) -> Optional[Solicitud]:
    return db.query(Solicitud).filter(Solicitud.id == solicitud_id).first()


def get_solicitud_by_codigo(db: Session, codigo: str) -> Optional[Solicitud]:
    return db.query(Solicitud).filter(Solicitud.codigo == codigo).first()


def list_solicitudes(db: Session) -> List[Solicitud]:
    return db.query(Solicitud).order_by(Solicitud.id).all()


def create_solicitud(db: Session, data: SolicitudCreate) -> Solicitud:
    create_data = data.model_dump()
    validar(
        errores_unicidad(db, Solicitud, create_data, CAMPOS_UNICOS),
        errores_llaves_foraneas(db, create_data, REFERENCIAS),
    )
    return guardar(db, Solicitud(**create_data))


def update_solicitud(db: Session, solicitud_id: int, data: SolicitudUpdate) -> Optional[Solicitud]:
    solicitud = get_solicitud(db, solicitud_id)
    if not solicitud:
        return None

    update_data = data.model_dump(exclude_unset=True)
    validar(
        errores_obligatorios(Solicitud, update_data),
        errores_unicidad(db, Solicitud, update_data, CAMPOS_UNICOS, excluir_id=solicitud_id),
        errores_llaves_foraneas(db, update_data, REFERENCIAS),
    )
    aplicar_cambios(solicitud, update_data)
    return guardar(db, solicitud)


def delete_solicitud(db: Session, solicitud_id: int) -> bool:
    return eliminar(db, get_solicitud(db, solicitud_id))
