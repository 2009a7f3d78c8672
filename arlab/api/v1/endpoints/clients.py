# arlab/api/v1/endpoints/clients.py
# type: ignore

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from arlab.api.v1.endpoints.auth import get_current_user
from arlab.core.errors import is_foreign_key_violation
from arlab.database import get_db
from arlab.models.auth import User
from arlab.models.clients import Client
from arlab.schemas.clients import ClientCreate, ClientDeleted, ClientInDB, ClientUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def get_client_or_404(client_id: int, db: Session) -> Client:
    client = db.query(Client).filter(Client.id == client_id).first()
    if not client:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente no encontrado.")
    return client


# ***************************************************************
# 1. Listar / buscar clientes (GET /)
# ***************************************************************
@router.get("", response_model=List[ClientInDB])
def read_clients(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
    search: Optional[str] = Query(None, description="Buscar por nombre, DNI o teléfono."),
):
    """Lista los clientes ordenados por nombre; `search` filtra sin distinguir mayúsculas."""
    query = db.query(Client)

    if search:
        search_pattern = f"%{search}%"
        query = query.filter(
            (Client.name.ilike(search_pattern)) |
            (Client.dni.ilike(search_pattern)) |
            (Client.phone.ilike(search_pattern))
        )

    return query.order_by(Client.name.asc()).all()


# ***************************************************************
# 2. Leer cliente por ID (GET /{client_id})
# ***************************************************************
@router.get("/{client_id}", response_model=ClientInDB)
def read_client(
    client_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return get_client_or_404(client_id, db)


# ***************************************************************
# 3. Crear cliente (POST /)
# ***************************************************************
@router.post("", response_model=ClientInDB, status_code=status.HTTP_201_CREATED)
def create_client(
    client_in: ClientCreate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    db_client = Client(**client_in.model_dump())

    db.add(db_client)
    db.commit()
    db.refresh(db_client)

    return db_client


# ***************************************************************
# 4. Modificar cliente (PUT /{client_id})
# ***************************************************************
@router.put("/{client_id}", response_model=ClientInDB)
def update_client(
    client_id: int,
    client_in: ClientUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """Reemplaza todos los datos del cliente."""
    db_client = get_client_or_404(client_id, db)

    for key, value in client_in.model_dump().items():
        setattr(db_client, key, value)

    db.add(db_client)
    db.commit()
    db.refresh(db_client)

    return db_client


# ***************************************************************
# 5. Eliminar cliente (DELETE /{client_id})
# ***************************************************************
@router.delete("/{client_id}", response_model=ClientDeleted)
def delete_client(
    client_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """Elimina un cliente. Falla con 409 si tiene ventas asociadas."""
    db_client = get_client_or_404(client_id, db)
    deleted = ClientInDB.model_validate(db_client)

    try:
        db.delete(db_client)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_foreign_key_violation(e):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="No se puede eliminar el cliente porque tiene ventas asociadas."
            )
        raise

    logger.info("Cliente %s eliminado", client_id)
    return {"message": "Cliente eliminado", "client": deleted}
