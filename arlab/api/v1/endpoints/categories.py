# arlab/api/v1/endpoints/categories.py
# type: ignore

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from arlab.api.v1.endpoints.auth import get_current_user
from arlab.database import get_db
from arlab.models.auth import User
from arlab.models.inventory import Category
from arlab.schemas.inventory import CategoryInDB

router = APIRouter()


@router.get("", response_model=List[CategoryInDB])
def read_categories(
    _: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Lista las categorías para el selector de productos."""
    return db.query(Category).order_by(Category.name.asc()).all()
