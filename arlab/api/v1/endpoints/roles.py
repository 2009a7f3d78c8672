# arlab/api/v1/endpoints/roles.py
# type: ignore

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from arlab.api.v1.endpoints.auth import get_current_user
from arlab.database import get_db
from arlab.models.auth import Role, User
from arlab.schemas.auth import RoleInDB

router = APIRouter()


# ***************************************************************
# 1. Endpoint para listar todos los Roles (ACCESO AUTENTICADO)
# ***************************************************************

@router.get("", response_model=List[RoleInDB])
def get_all_roles(
    _: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Lista los roles disponibles (admin, reception)."""
    return db.query(Role).order_by(Role.id.asc()).all()
