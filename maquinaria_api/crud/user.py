from sqlalchemy.orm import Session
from typing import Optional

from maquinaria_api.core.security import hash_password, verify_password
from maquinaria_api.models.user import User
from maquinaria_api.schemas.auth import RegisterRequest
from maquinaria_api.crud.base import errores_unicidad, guardar, validar


# -----------------------------------------------------
# Obtener usuario por email
# -----------------------------------------------------
def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


# -----------------------------------------------------
# Autenticar usuario
# -----------------------------------------------------
def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user


# -----------------------------------------------------
# Crear usuario
# -----------------------------------------------------
def create_user(db: Session, data: RegisterRequest) -> User:
    create_data = data.model_dump()
    validar(errores_unicidad(db, User, create_data, ("email",)))
    create_data["hashed_password"] = hash_password(create_data.pop("password"))
    return guardar(db, User(**create_data))
