# maquinaria_api/models/user.py
from sqlalchemy import Column, String, Enum
from sqlalchemy.orm import relationship
from maquinaria_api.db.base import Base, IdType, TimestampMixin
import enum


class RolUsuario(enum.Enum):
    admin = "admin"
    empleado = "empleado"
    supervisor = "supervisor"


class User(TimestampMixin, Base):
    __tablename__ = "users"

    id = Column(IdType, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    hashed_password = Column(String(255), nullable=False)
    rol = Column(Enum(RolUsuario), nullable=False, default=RolUsuario.empleado)

    tokens_revocados = relationship("TokenRevocado", back_populates="user", cascade="all, delete-orphan")
