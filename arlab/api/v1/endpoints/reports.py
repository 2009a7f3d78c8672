# arlab/api/v1/endpoints/reports.py
# type: ignore

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from arlab.api.v1.endpoints.auth import get_admin_user
from arlab.database import get_db
from arlab.models.auth import User
from arlab.models.clients import Client
from arlab.models.inventory import Product
from arlab.models.sales import Sale, SaleItem
from arlab.schemas.reports import DailySales, SummaryReport, TopProduct

router = APIRouter()

TOP_PRODUCTS_LIMIT = 5
WEEK_DAYS = 7


# ***************************************************************
# 1. KPIs generales (GET /summary)
# ***************************************************************
@router.get("/summary", response_model=SummaryReport)
def summary(
    db: Session = Depends(get_db),
    _: User = Depends(get_admin_user),
):
    """Cantidad de ventas, ingresos totales y cantidad de clientes."""
    total_sales, total_revenue = db.query(
        func.count(Sale.id), func.coalesce(func.sum(Sale.total), 0)
    ).one()
    total_clients = db.query(func.count(Client.id)).scalar()

    return SummaryReport(
        total_sales=total_sales,
        total_revenue=Decimal(str(total_revenue)),
        total_clients=total_clients,
    )


# ***************************************************************
# 2. Análisis más vendidos (GET /top-products)
# ***************************************************************
@router.get("/top-products", response_model=List[TopProduct])
def top_products(
    db: Session = Depends(get_db),
    _: User = Depends(get_admin_user),
):
    """Top 5 productos por cantidad vendida, con su recaudación."""
    quantity_sold = func.sum(SaleItem.quantity).label("quantity_sold")
    revenue = func.sum(SaleItem.quantity * SaleItem.unit_price).label("revenue")

    rows = (
        db.query(Product.id, Product.description, quantity_sold, revenue)
        .join(SaleItem, SaleItem.product_id == Product.id)
        .group_by(Product.id, Product.description)
        .order_by(quantity_sold.desc(), Product.id.asc())
        .limit(TOP_PRODUCTS_LIMIT)
        .all()
    )

    return [
        TopProduct(
            product_id=row.id,
            description=row.description,
            quantity_sold=row.quantity_sold,
            revenue=Decimal(str(row.revenue)),
        )
        for row in rows
    ]


# ***************************************************************
# 3. Ventas de los últimos 7 días (GET /weekly-sales)
# ***************************************************************
@router.get("/weekly-sales", response_model=List[DailySales])
def weekly_sales(
    db: Session = Depends(get_db),
    _: User = Depends(get_admin_user),
):
    """Cantidad e importe de ventas por día (hoy y los 6 días anteriores)."""
    since = datetime.combine(date.today() - timedelta(days=WEEK_DAYS - 1), time.min)
    day = func.date(Sale.timestamp).label("day")

    rows = (
        db.query(day, func.count(Sale.id).label("sales_count"), func.sum(Sale.total).label("total_amount"))
        .filter(Sale.timestamp >= since)
        .group_by(day)
        .order_by(day.asc())
        .all()
    )

    return [
        DailySales(
            date=row.day,
            sales_count=row.sales_count,
            total_amount=Decimal(str(row.total_amount)),
        )
        for row in rows
    ]
