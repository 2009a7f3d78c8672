# arlab/initial_data.py

import logging

from sqlalchemy.orm import Session

from arlab.core.config import Settings
from arlab.core.security import get_password_hash
from arlab.models.auth import ROLE_ADMIN, ROLE_RECEPTION, Role, User
from arlab.models.inventory import Category

logger = logging.getLogger(__name__)

# El orden fija los IDs: 1 = admin, 2 = reception
DEFAULT_ROLES = [ROLE_ADMIN, ROLE_RECEPTION]

DEFAULT_CATEGORIES = [
    "Bioquímica",
    "Hematología",
    "Inmunología",
    "Microbiología",
    "Orina",
]


def seed_roles(db: Session) -> None:
    existing = {name for (name,) in db.query(Role.name).all()}
    for name in DEFAULT_ROLES:
        if name not in existing:
            db.add(Role(name=name))
            db.flush()


def seed_categories(db: Session) -> None:
    if db.query(Category).first():
        return
    for name in DEFAULT_CATEGORIES:
        db.add(Category(name=name))


def seed_admin(db: Session, settings: Settings) -> None:
    """Crea el administrador inicial si está configurado y aún no existe."""
    if not settings.admin_email or not settings.admin_password:
        return
    if db.query(User).filter(User.email == settings.admin_email).first():
        return

    role = db.query(Role).filter(Role.name == ROLE_ADMIN).one()
    db.add(User(
        name=settings.admin_name,
        email=settings.admin_email,
        password_hash=get_password_hash(settings.admin_password),
        role_id=role.id,
        active=True,
    ))
    logger.info("Administrador inicial creado: %s", settings.admin_email)


def init_db(db: Session, settings: Settings) -> None:
    """Siembra los datos de referencia. Se puede ejecutar en cada arranque."""
    seed_roles(db)
    seed_categories(db)
    seed_admin(db, settings)
    db.commit()
