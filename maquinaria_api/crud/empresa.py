from sqlalchemy.orm import Session
from typing import List, Optional

from maquinaria_api.models.empresa import Empresa
from maquinaria_api.schemas.empresa import EmpresaCreate, EmpresaUpdate
from maquinaria_api.crud.base import (
    aplicar_cambios,
    eliminar,
    errores_obligatorios,
    errores_unicidad,
    guardar,
    validar,
)

CAMPOS_UNICOS = ("nit", "email")


def get_empresa(db: Session, empresa_id: int) -> Optional[Empresa]:
    return db.query(Empresa).filter(Empresa.id == empresa_id).first()


def list_empresas(db: Session) -> List[Empresa]:
    return db.query(Empresa).order_by(Empresa.id).all()


def create_empresa(db: Session, data: EmpresaCreate) -> Empresa:
    create_data = data.model_dump()
    validar(errores_unicidad(db, Empresa, create_data, CAMPOS_UNICOS))
    return guardar(db, Empresa(**create_data))


def update_empresa(db: Session, empresa_id: int, data: EmpresaUpdate) -> Optional[Empresa]:
    empresa = get_empresa(db, empresa_id)
    if not empresa:
        return None

    update_data = data.model_dump(exclude_unset=True)
    validar(
        errores_obligatorios(Empresa, update_data),
        errores_unicidad(db, Empresa, update_data, CAMPOS_UNICOS, excluir_id=empresa_id),
    )
    aplicar_cambios(empresa, update_data)
    return guardar(db, empresa)


def delete_empresa(db: Session, empresa_id: int) -> bool:
    return eliminar(db, get_empresa(db, empresa_id))
