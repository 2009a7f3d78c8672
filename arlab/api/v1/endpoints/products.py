# arlab/api/v1/endpoints/products.py
# type: ignore

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from arlab.api.v1.endpoints.auth import get_admin_user, get_current_user
from arlab.core.errors import is_foreign_key_violation
from arlab.database import get_db
from arlab.models.auth import User
from arlab.models.inventory import Category, Product
from arlab.schemas.inventory import ProductCreate, ProductDeleted, ProductInDB, ProductUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

# ***************************************************************
# AYUDANTES
# ***************************************************************

def get_product_or_404(product_id: int, db: Session) -> Product:
    product = db.query(Product).filter(Product.id == product_id).first()
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Producto no encontrado.")
    return product


def check_category(category_id: Optional[int], db: Session) -> None:
    """La categoría es opcional, pero si se indica debe existir."""
    if category_id is not None and not db.query(Category).filter(Category.id == category_id).first():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Categoría no encontrada.")


# ***************************************************************
# 1. Endpoint para Crear Producto (POST /)
# ***************************************************************
@router.post("", response_model=ProductInDB, status_code=status.HTTP_201_CREATED)
def create_product(
    product_in: ProductCreate,
    db: Session = Depends(get_db),
    # Solo administradores pueden crear productos
    _: User = Depends(get_admin_user),
):
    check_category(product_in.category_id, db)

    db_product = Product(**product_in.model_dump())

    db.add(db_product)
    db.commit()
    db.refresh(db_product)

    return db_product

# ***************************************************************
# 2. Endpoint para Listar Productos (GET /)
# ***************************************************************
@router.get("", response_model=List[ProductInDB])
def read_products(
    db: Session = Depends(get_db),
    # Cualquier usuario autenticado puede ver productos (recepción arma el carrito)
    _: User = Depends(get_current_user),
    search: Optional[str] = Query(None, description="Buscar por código o descripción."),
):
    """Lista productos con el nombre de su categoría, ordenados por descripción."""
    query = db.query(Product)

    if search:
        search_pattern = f"%{search}%"
        query = query.filter(
            (Product.code.ilike(search_pattern)) |
            (Product.description.ilike(search_pattern))
        )

    return query.order_by(Product.description.asc()).all()


# ***************************************************************
# 3. Endpoint para Leer Producto por ID (GET /{product_id})
# ***************************************************************
@router.get("/{product_id}", response_model=ProductInDB)
def read_product(
    product_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return get_product_or_404(product_id, db)


# ***************************************************************
# 4. Endpoint para Actualizar Producto (PUT /{product_id})
# ***************************************************************
@router.put("/{product_id}", response_model=ProductInDB)
def update_product(
    product_id: int,
    product_in: ProductUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(get_admin_user),
):
    """Reemplaza los datos del producto. Las ventas ya registradas conservan su precio."""
    db_product = get_product_or_404(product_id, db)
    check_category(product_in.category_id, db)

    for key, value in product_in.model_dump().items():
        setattr(db_product, key, value)

    db.add(db_product)
    db.commit()
    db.refresh(db_product)

    return db_product

# ***************************************************************
# 5. Endpoint para Eliminar Producto (DELETE /{product_id})
# ***************************************************************
@router.delete("/{product_id}", response_model=ProductDeleted)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_admin_user),
):
    """Elimina un producto. Falla con 409 si ya fue vendido."""
    db_product = get_product_or_404(product_id, db)
    deleted = ProductInDB.model_validate(db_product)

    try:
        db.delete(db_product)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_foreign_key_violation(e):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="No se puede eliminar el producto porque figura en ventas registradas."
            )
        raise

    logger.info("Producto %s eliminado", product_id)
    return {"message": "Producto eliminado", "product": deleted}
