from sqlalchemy.orm import Session
from typing import List, Optional

from maquinaria_api.models.categoria import Categoria
from maquinaria_api.schemas.categoria import CategoriaCreate, CategoriaUpdate
from maquinaria_api.crud.base import aplicar_cambios, eliminar, errores_obligatorios, guardar, validar


def get_categoria(db: Session, categoria_id: int) -> Optional[Categoria]:
    return db.query(Categoria).filter(Categoria.id == categoria_id).first()


def list_categorias(db: Session) -> List[Categoria]:
    return db.query(Categoria).order_by(Categoria.id).all()


def create_categoria(db: Session, data: CategoriaCreate) -> Categoria:
    return guardar(db, Categoria(**data.model_dump()))


def update_categoria(db: Session, categoria_id: int, data: CategoriaUpdate) -> Optional[Categoria]:
    categoria = get_categoria(db, categoria_id)
    if not categoria:
        return None

    update_data = data.model_dump(exclude_unset=True)
    validar(errores_obligatorios(Categoria, update_data))
    aplicar_cambios(categoria, update_data)
    return guardar(db, categoria)


def delete_categoria(db: Session, categoria_id: int) -> bool:
    return eliminar(db, get_categoria(db, categoria_id))
