# arlab/schemas/reports.py
# type: ignore

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, field_serializer


class SummaryReport(BaseModel):
    """KPIs globales."""
    total_sales: int
    total_revenue: Decimal
    total_clients: int

    @field_serializer("total_revenue")
    def serialize_decimal(self, value: Decimal) -> float:
        return float(value)


class TopProduct(BaseModel):
    product_id: int
    description: str
    quantity_sold: int
    revenue: Decimal

    @field_serializer("revenue")
    def serialize_decimal(self, value: Decimal) -> float:
        return float(value)


class DailySales(BaseModel):
    date: dt.date
    sales_count: int
    total_amount: Decimal

    @field_serializer("total_amount")
    def serialize_decimal(self, value: Decimal) -> float:
        return float(value)
