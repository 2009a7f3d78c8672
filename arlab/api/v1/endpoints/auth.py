# arlab/api/v1/endpoints/auth.py
# type: ignore

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from arlab.core.security import (
    create_access_token,
    decode_token,
    reusable_oauth2,
    verify_password,
)
from arlab.database import get_db
from arlab.models.auth import ROLE_ADMIN, User
from arlab.schemas.auth import LoginResponse, UserInDB, UserLogin

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_CREDENTIALS = "Credenciales inválidas."


def user_to_schema(user: User) -> UserInDB:
    """Mapea un User a su representación pública (sin password_hash)."""
    return UserInDB(
        id=user.id,
        name=user.name,
        email=user.email,
        role_id=user.role_id,
        role_name=user.role.name,
        active=user.active,
        created_at=user.created_at,
    )


# ***************************************************************
# Dependencia para obtener el usuario autenticado
# ***************************************************************
def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
    token: Optional[str] = Depends(reusable_oauth2),
) -> User:
    """Decodifica el token, obtiene el ID del usuario y lo busca en la DB."""
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No autenticado.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token_data = decode_token(token, request.app.state.settings)
    if token_data.sub is None or not token_data.sub.isdigit():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    user = db.query(User).filter(User.id == int(token_data.sub)).first()
    if user is None or not user.active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Usuario no encontrado o inactivo.")

    return user


def get_admin_user(current_user: User = Depends(get_current_user)) -> User:
    """Requiere que el usuario tenga el rol 'admin'."""
    if current_user.role.name != ROLE_ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Acceso denegado. Se requiere rol 'admin'."
        )
    return current_user


# ***************************************************************
# 1. Endpoint de Login
# ***************************************************************
@router.post("/login", response_model=LoginResponse)
def login(user_in: UserLogin, request: Request, db: Session = Depends(get_db)):
    """Autentica un usuario por email y contraseña."""
    if not user_in.email or not user_in.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email y contraseña son requeridos."
        )

    user = db.query(User).filter(User.email == user_in.email).first()

    # Mismo mensaje si no existe el email o si la contraseña no coincide
    if not user or not verify_password(user_in.password, user.password_hash):
        logger.warning("Login fallido para: %s", user_in.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="La cuenta de usuario está inactiva.",
        )

    logger.info("Login exitoso para: %s", user.email)

    token = create_access_token(user.id, user.role.name, request.app.state.settings)
    return {
        "message": "Login exitoso",
        "user": {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "role_id": user.role_id,
            "role_name": user.role.name,
        },
        "token": token,
    }


# ***************************************************************
# 2. Usuario autenticado
# ***************************************************************
@router.get("/me", response_model=UserInDB)
def read_users_me(current_user: User = Depends(get_current_user)):
    """Obtiene la información del usuario autenticado."""
    return user_to_schema(current_user)
