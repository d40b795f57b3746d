from sqlalchemy.orm import Session

from maquinaria_api.core.config import settings
from maquinaria_api.core.security import hash_password
from maquinaria_api.models.user import User, RolUsuario
from maquinaria_api.utils.logger import logger


def create_default_admin(db: Session) -> User:
	# crear usuario admin si no existe
	admin = db.query(User).filter(User.email == settings.admin_email).first()
	if not admin:
		admin = User(
			name="Administrador",
			email=settings.admin_email,
			hashed_password=hash_password(settings.admin_password),
			rol=RolUsuario.admin,
		)
		db.add(admin)
		db.commit()
		db.refresh(admin)
		logger.info("Admin creado: %s", admin.email)
	return admin
