# maquinaria_api/services/auth_service.py
from datetime import timedelta
from typing import Optional

from sqlalchemy.orm import Session

from maquinaria_api.core.security import create_access_token
from maquinaria_api.crud.user import authenticate, create_user
from maquinaria_api.models.user import User
from maquinaria_api.schemas.auth import RegisterRequest, TokenData, UserRead


def _token_para(user: User, expires_delta: Optional[timedelta] = None) -> TokenData:
    token = create_access_token(
        subject=str(user.id),
        expires_delta=expires_delta,
        extra_claims={"rol": user.rol.value},
    )
    return TokenData(user=UserRead.model_validate(user), token=token)


def register(db: Session, data: RegisterRequest) -> TokenData:
    user = create_user(db, data)
    return _token_para(user)


def login(db: Session, email: str, password: str, expires_delta: Optional[timedelta] = None) -> Optional[TokenData]:
    user = authenticate(db, email, password)
    if not user:
        return None
    return _token_para(user, expires_delta)
