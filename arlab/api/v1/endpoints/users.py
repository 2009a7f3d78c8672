# arlab/api/v1/endpoints/users.py
# type: ignore

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from arlab.api.v1.endpoints.auth import get_admin_user, user_to_schema
from arlab.core.security import get_password_hash
from arlab.database import get_db
from arlab.models.auth import Role, User
from arlab.schemas.auth import UserCreate, UserInDB, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

# ***************************************************************
# AYUDANTES DE VALIDACIÓN
# ***************************************************************

def get_user_or_404(user_id: int, db: Session) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usuario no encontrado.")
    return user


def check_role_exists(role_id: int, db: Session) -> Role:
    role = db.query(Role).filter(Role.id == role_id).first()
    if not role:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Rol no encontrado.")
    return role


def check_email_available(email: str, db: Session, exclude_id: Optional[int] = None) -> None:
    query = db.query(User).filter(User.email == email)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    if query.first():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="El email ya está registrado.")


# ***************************************************************
# 1. Endpoint para Listar Usuarios (GET /api/v1/users/)
# ***************************************************************
@router.get("", response_model=List[UserInDB])
def read_users(
    db: Session = Depends(get_db),
    _: User = Depends(get_admin_user),
):
    """Lista el personal con el nombre de su rol."""
    users = db.query(User).order_by(User.name.asc()).all()
    return [user_to_schema(user) for user in users]


# ***************************************************************
# 2. Endpoint para Crear Usuario (POST /api/v1/users/)
# ***************************************************************
@router.post("", response_model=UserInDB, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    _: User = Depends(get_admin_user),
):
    """Crea un usuario; la contraseña se guarda solo como hash."""
    check_email_available(user_in.email, db)
    check_role_exists(user_in.role_id, db)

    db_user = User(
        name=user_in.name,
        email=user_in.email,
        password_hash=get_password_hash(user_in.password),
        role_id=user_in.role_id,
        active=user_in.active,
    )

    db.add(db_user)
    db.commit()
    db.refresh(db_user)

    logger.info("Usuario %s creado (rol %s)", db_user.email, db_user.role.name)
    return user_to_schema(db_user)


# ***************************************************************
# 3. Endpoint para Buscar Usuario por ID (GET /api/v1/users/{user_id})
# ***************************************************************
@router.get("/{user_id}", response_model=UserInDB)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_admin_user),
):
    return user_to_schema(get_user_or_404(user_id, db))


# ***************************************************************
# 4. Endpoint para Actualizar Usuario (PUT /api/v1/users/{user_id})
# ***************************************************************
@router.put("/{user_id}", response_model=UserInDB)
def update_user(
    user_id: int,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(get_admin_user),
):
    """
    Actualiza los datos del usuario. Si no se envía contraseña (o llega vacía)
    se conserva la actual. Desactivar = `active: false`.
    """
    db_user = get_user_or_404(user_id, db)

    if user_in.email != db_user.email:
        check_email_available(user_in.email, db, exclude_id=db_user.id)
    check_role_exists(user_in.role_id, db)

    db_user.name = user_in.name
    db_user.email = user_in.email
    db_user.role_id = user_in.role_id
    db_user.active = user_in.active

    if user_in.password:
        db_user.password_hash = get_password_hash(user_in.password)

    db.add(db_user)
    db.commit()
    db.refresh(db_user)

    return user_to_schema(db_user)
