# maquinaria_api/api/v1/routers/auth.py
"""
Router de autenticación: registro, login, logout y perfil.

Los tokens se emiten y validan con las funciones centralizadas de
maquinaria_api.core.security. El logout revoca el token presentado
registrando su `jti`.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from maquinaria_api.db.session import get_db
from maquinaria_api.core.security import get_current_user, get_token_payload, revoke_token
from maquinaria_api.models.user import User
from maquinaria_api.schemas.auth import LoginRequest, RegisterRequest, TokenData, UserRead
from maquinaria_api.schemas.common import MensajeRespuesta, RespuestaAPI, RESPUESTAS_ERROR
from maquinaria_api.services import auth_service
from maquinaria_api.utils.logger import logger

# Rutas públicas
router = APIRouter(tags=["Auth"])

# Rutas que requieren token
protected_router = APIRouter(tags=["Auth"], responses={401: RESPUESTAS_ERROR[401]})


@router.post(
    "/register",
    response_model=RespuestaAPI[TokenData],
    status_code=status.HTTP_201_CREATED,
    summary="Registrar usuario"
)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    """
    Crea un usuario y devuelve un token de acceso listo para usar.
    El email debe ser único.
    """
    data = auth_service.register(db, payload)
    logger.info("Usuario registrado: %s (rol=%s)", data.user.email, data.user.rol.value)
    return {"status": True, "message": "Usuario registrado exitosamente", "data": data}


@router.post("/login", response_model=RespuestaAPI[TokenData], summary="Login con email y contraseña")
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    data = auth_service.login(db, credentials.email, credentials.password)
    if not data:
        logger.warning("Login fallido para %s", credentials.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Credenciales inválidas")

    logger.info("Login exitoso: %s", data.user.email)
    return {"status": True, "message": "Login exitoso", "data": data}


@protected_router.post("/logout", response_model=MensajeRespuesta, summary="Cerrar sesión")
def logout(payload: Dict[str, Any] = Depends(get_token_payload), db: Session = Depends(get_db)):
    """Revoca el token actual; usarlo de nuevo responde 401."""
    revoke_token(db, payload)
    logger.info("Sesión cerrada para usuario %s", payload.get("sub"))
    return {"status": True, "message": "Logout exitoso"}


@protected_router.get("/me", response_model=RespuestaAPI[UserRead], summary="Usuario autenticado")
def me(current_user: User = Depends(get_current_user)):
    return {"status": True, "data": current_user}


@protected_router.get("/user", response_model=UserRead, summary="Usuario autenticado (sin sobre)")
def user(current_user: User = Depends(get_current_user)):
    return current_user
