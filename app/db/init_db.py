from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import hash_password
from app.models.usuario import RolUsuario, Usuario
from app.utils.logger import logger


def create_default_admin(db: Session) -> None:
	# crear admin si no existe ninguno
	if db.query(Usuario).filter(Usuario.rol == RolUsuario.admin).first():
		return

	admin = db.query(Usuario).filter(Usuario.email == settings.admin_email).first()
	if admin:
		admin.rol = RolUsuario.admin
	else:
		admin = Usuario(
			nombre="Administrador",
			email=settings.admin_email,
			password_hash=hash_password(settings.admin_password),
			rol=RolUsuario.admin,
		)
		db.add(admin)
	db.commit()
	db.refresh(admin)
	logger.info("Admin creado: %s", admin.email)
