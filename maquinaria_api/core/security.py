# maquinaria_api/core/security.py
"""
Funciones centralizadas de seguridad: hashing de contraseñas, emisión y
validación de JWT, y dependencia de usuario autenticado.

Cada token lleva un `jti` único; el logout lo registra en `tokens_revocados`
y a partir de ese momento el token deja de ser aceptado.
"""
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from maquinaria_api.core.config import settings
from maquinaria_api.db.session import get_db
from maquinaria_api.models.token_revocado import TokenRevocado
from maquinaria_api.models.user import User

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# auto_error=False: la ausencia de token se reporta con el mensaje propio del API
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)

NO_AUTENTICADO = "Unauthenticated."


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    subject: str,
    expires_delta: Optional[timedelta] = None,
    extra_claims: Optional[Dict[str, Any]] = None,
) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode: Dict[str, Any] = {
        "sub": str(subject),
        "exp": expire,
        "jti": uuid.uuid4().hex,
    }
    if extra_claims:
        to_encode.update(extra_claims)
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Decodifica y valida firma/expiración. Lanza JWTError si no es válido."""
    return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])


def _unauthenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=NO_AUTENTICADO,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_token_payload(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    if not token:
        raise _unauthenticated()
    try:
        payload = decode_access_token(token)
    except JWTError as exc:
        raise _unauthenticated() from exc

    jti = payload.get("jti")
    if not jti or db.query(TokenRevocado).filter(TokenRevocado.jti == jti).first():
        raise _unauthenticated()
    return payload


def get_current_user(
    payload: Dict[str, Any] = Depends(get_token_payload),
    db: Session = Depends(get_db),
) -> User:
    user_id = payload.get("sub")
    user = db.query(User).filter(User.id == int(user_id)).first() if user_id and user_id.isdigit() else None
    if not user:
        raise _unauthenticated()
    return user


def revoke_token(db: Session, payload: Dict[str, Any]) -> None:
    exp = payload.get("exp")
    registro = TokenRevocado(
        jti=payload["jti"],
        user_id=int(payload["sub"]),
        expira_en=datetime.fromtimestamp(exp, tz=timezone.utc) if exp else None,
    )
    db.add(registro)
    db.commit()
