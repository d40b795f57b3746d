# maquinaria_api/models/token_revocado.py
from sqlalchemy import Column, String, DateTime, ForeignKey, BigInteger
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from maquinaria_api.db.base import Base, IdType


class TokenRevocado(Base):
    """Tokens invalidados por logout antes de su expiración."""
    __tablename__ = "tokens_revocados"

    id = Column(IdType, primary_key=True, autoincrement=True)
    jti = Column(String(64), nullable=False, unique=True, index=True)
    user_id = Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    expira_en = Column(DateTime(timezone=True), nullable=True,
                       comment="Expiración original del token; permite purgar registros vencidos")
    revocado_en = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="tokens_revocados")
