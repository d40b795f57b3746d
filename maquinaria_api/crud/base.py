# maquinaria_api/crud/base.py
"""
Validaciones compartidas por los módulos CRUD.

Todas acumulan los errores por campo y lanzan un único ErrorValidacion,
que el API responde como 422 con `errors` agrupados por campo.
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type

from sqlalchemy.orm import Session

from maquinaria_api.core.exceptions import ErrorValidacion
from maquinaria_api.db.base import Base


def errores_unicidad(
    db: Session,
    model: Type[Base],
    data: Mapping[str, Any],
    campos: Iterable[str],
    excluir_id: Optional[int] = None,
) -> Dict[str, List[str]]:
    errores: Dict[str, List[str]] = {}
    for campo in campos:
        valor = data.get(campo)
        if valor is None:
            continue
        query = db.query(model.id).filter(getattr(model, campo) == valor)
        if excluir_id is not None:
            query = query.filter(model.id != excluir_id)
        if query.first():
            errores[campo] = [f"El campo {campo} ya ha sido registrado."]
    return errores


def errores_llaves_foraneas(
    db: Session,
    data: Mapping[str, Any],
    referencias: Mapping[str, Type[Base]],
) -> Dict[str, List[str]]:
    errores: Dict[str, List[str]] = {}
    for campo, model in referencias.items():
        valor = data.get(campo)
        if valor is None:
            continue
        if db.get(model, valor) is None:
            errores[campo] = [f"El campo {campo} seleccionado no existe."]
    return errores


def errores_obligatorios(model: Type[Base], data: Mapping[str, Any]) -> Dict[str, List[str]]:
    """Un PUT no puede enviar null en una columna NOT NULL."""
    errores: Dict[str, List[str]] = {}
    columnas = model.__table__.columns
    for campo, valor in data.items():
        if valor is None and campo in columnas and not columnas[campo].nullable:
            errores[campo] = [f"El campo {campo} es obligatorio."]
    return errores


def validar(*grupos: Dict[str, List[str]]) -> None:
    errores: Dict[str, List[str]] = {}
    for grupo in grupos:
        for campo, mensajes in grupo.items():
            errores.setdefault(campo, []).extend(mensajes)
    if errores:
        raise ErrorValidacion(errores)


def aplicar_cambios(obj: Base, data: Mapping[str, Any]) -> Base:
    for field, value in data.items():
        setattr(obj, field, value)
    return obj


def guardar(db: Session, obj: Base) -> Base:
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def eliminar(db: Session, obj: Optional[Base]) -> bool:
    if obj is None:
        return False
    db.delete(obj)
    db.commit()
    return True
