# maquinaria_api/schemas/auth.py
from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

from maquinaria_api.models.user import RolUsuario


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Maryuri Zorro"])
    email: EmailStr = Field(..., examples=["maryuri@example.com"])
    password: str = Field(..., min_length=6, examples=["123456"])
    rol: RolUsuario = Field(..., examples=["empleado"])


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., examples=["maryuri@example.com"])
    password: str = Field(..., min_length=1)


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    rol: RolUsuario
    creado_en: Optional[datetime] = None
    actualizado_en: Optional[datetime] = None

    class Config:
        from_attributes = True


class TokenData(BaseModel):
    user: UserRead
    token: str
    token_type: str = "Bearer"
