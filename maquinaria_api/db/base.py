from sqlalchemy import BigInteger, Column, DateTime, Integer
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class TimestampMixin:
    """Columnas de auditoría comunes a todas las tablas."""
    creado_en = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    actualizado_en = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


# SQLite solo autoincrementa columnas INTEGER PRIMARY KEY
IdType = BigInteger().with_variant(Integer, "sqlite")
