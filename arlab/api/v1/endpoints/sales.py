# arlab/api/v1/endpoints/sales.py
# type: ignore

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session, joinedload, selectinload

from arlab.api.v1.endpoints.auth import get_current_user
from arlab.database import get_db
from arlab.models.auth import User
from arlab.models.clients import Client
from arlab.models.sales import Sale, SaleItem
from arlab.schemas.sales import Receipt, SaleCreate, SaleCreated, SaleOut
from arlab.services.sales import SaleError, register_sale

router = APIRouter()


def sale_to_schema(sale: Sale) -> SaleOut:
    return SaleOut(
        id=sale.id,
        timestamp=sale.timestamp,
        client_id=sale.client_id,
        client_name=sale.client.name,
        user_id=sale.user_id,
        user_name=sale.user.name,
        total=sale.total,
        discount=sale.discount,
        items=[
            {
                "product_id": item.product_id,
                "product_description": item.product.description,
                "quantity": item.quantity,
                "unit_price": item.unit_price,
            }
            for item in sale.items
        ],
    )


# ***************************************************************
# 1. Listado de ventas con filtros (GET /)
# ***************************************************************
@router.get("", response_model=List[SaleOut])
def read_sales(
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
    search_client: Optional[str] = Query(None, alias="searchClient", description="Parte del nombre del cliente."),
    date_from: Optional[date] = Query(None, alias="dateFrom", description="Desde (inclusive, desde las 00:00)."),
    date_to: Optional[date] = Query(None, alias="dateTo", description="Hasta (inclusive, todo el día)."),
):
    """Ventas con cliente, usuario y detalle de productos, de la más reciente a la más antigua."""
    query = (
        db.query(Sale)
        .join(Client, Sale.client_id == Client.id)
        .join(User, Sale.user_id == User.id)
        .options(
            joinedload(Sale.client),
            joinedload(Sale.user),
            selectinload(Sale.items).joinedload(SaleItem.product),
        )
    )

    if search_client:
        query = query.filter(Client.name.ilike(f"%{search_client}%"))

    # Solo cuenta la fecha: el fin se compara contra el inicio del día siguiente
    if date_from:
        query = query.filter(Sale.timestamp >= datetime.combine(date_from, time.min))
    if date_to:
        query = query.filter(Sale.timestamp < datetime.combine(date_to + timedelta(days=1), time.min))

    sales = query.order_by(Sale.timestamp.desc(), Sale.id.desc()).all()
    return [sale_to_schema(sale) for sale in sales]


# ***************************************************************
# 2. Registrar venta (POST /)
# ***************************************************************
@router.post("", response_model=SaleCreated, status_code=status.HTTP_201_CREATED)
def create_sale(
    sale_in: SaleCreate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """
    Registra la venta y todas sus líneas de forma atómica.

    - 400 si falta cliente, usuario o el carrito está vacío (antes de abrir la transacción).
    - 500 si la transacción falla (se deshace completa).
    """
    if not sale_in.client_id or not sale_in.user_id or not sale_in.items:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Faltan datos para la venta.")

    try:
        sale_id = register_sale(db, sale_in)
    except SaleError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    return {"message": "Venta registrada con éxito", "sale_id": sale_id}


# ***************************************************************
# 3. Comprobante de una venta (GET /{sale_id})
# ***************************************************************
@router.get("/{sale_id}", response_model=Receipt)
def read_receipt(
    sale_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """Datos para imprimir el comprobante de una venta."""
    sale = (
        db.query(Sale)
        .options(
            joinedload(Sale.client),
            joinedload(Sale.user),
            selectinload(Sale.items).joinedload(SaleItem.product),
        )
        .filter(Sale.id == sale_id)
        .first()
    )
    if not sale:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Venta no encontrada.")

    lines = []
    subtotal = Decimal("0")
    for item in sale.items:
        line_total = item.unit_price * item.quantity
        subtotal += line_total
        lines.append({
            "product_id": item.product_id,
            "code": item.product.code,
            "description": item.product.description,
            "quantity": item.quantity,
            "unit_price": item.unit_price,
            "subtotal": line_total,
        })

    client = sale.client
    return Receipt(
        sale_id=sale.id,
        timestamp=sale.timestamp,
        staff_name=sale.user.name,
        client={
            "id": client.id,
            "name": client.name,
            "dni": client.dni,
            "phone": client.phone,
            "address": client.address,
            "business_name": client.business_name,
        },
        lines=lines,
        subtotal=subtotal,
        discount=sale.discount,
        total=sale.total,
    )
