from sqlalchemy.orm import Session
from typing import List, Optional

from maquinaria_api.models.empresa import Empresa
from maquinaria_api.models.representante import Representante
from maquinaria_api.schemas.representante import RepresentanteCreate, RepresentanteUpdate
from maquinaria_api.crud.base import (
    aplicar_cambios,
    eliminar,
    errores_llaves_foraneas,
    errores_obligatorios,
    errores_unicidad,
    guardar,
    validar,
)

CAMPOS_UNICOS = ("documento", "email")
REFERENCIAS = {"empresa_id": Empresa}


def get_representante(db: Session, representante_id: int) -> Optional[Representante]:
    return db.query(Representante).filter(Representante.id == representante_id).first()


def list_representantes(db: Session) -> List[Representante]:
    return db.query(Representante).order_by(Representante.id).all()


def create_representante(db: Session, data: RepresentanteCreate) -> Representante:
    create_data = data.model_dump()
    validar(
        errores_unicidad(db, Representante, create_data, CAMPOS_UNICOS),
        errores_llaves_foraneas(db, create_data, REFERENCIAS),
    )
    return guardar(db, Representante(**create_data))


def update_representante(db: Session, representante_id: int, data: RepresentanteUpdate) -> Optional[Representante]:
    representante = get_representante(db, representante_id)
    if not representante:
        return None

    update_data = data.model_dump(exclude_unset=True)
    validar(
        errores_obligatorios(Representante, update_data),
        errores_unicidad(db, Representante, update_data, CAMPOS_UNICOS, excluir_id=representante_id),
        errores_llaves_foraneas(db, update_data, REFERENCIAS),
    )
    aplicar_cambios(representante, update_data)
    return guardar(db, representante)


def delete_representante(db: Session, representante_id: int) -> bool:
    return eliminar(db, get_representante(db, representante_id))
