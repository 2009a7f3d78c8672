# arlab/schemas/sales.py
# type: ignore

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_serializer


# ***************************************************************
# 1. Entrada: registro de venta
# ***************************************************************
class SaleItemCreate(BaseModel):
    product_id: int
    quantity: int = Field(..., gt=0)
    unit_price: Decimal = Field(..., ge=0, decimal_places=2)


class SaleCreate(BaseModel):
    """
    Carrito enviado por recepción.

    `total` ya viene calculado (suma de líneas menos descuento) y se guarda tal cual.
    Cliente, usuario e items se validan en el endpoint para devolver un único mensaje.
    """
    client_id: Optional[int] = None
    user_id: Optional[int] = None
    items: Optional[List[SaleItemCreate]] = None
    total: Decimal = Field(..., ge=0, decimal_places=2)
    discount: Decimal = Field(Decimal("0"), ge=0, decimal_places=2)


class SaleCreated(BaseModel):
    message: str
    sale_id: int


# ***************************************************************
# 2. Salida: listado de ventas con detalle
# ***************************************************************
class SaleItemOut(BaseModel):
    product_id: int
    product_description: str
    quantity: int
    unit_price: Decimal

    @field_serializer("unit_price")
    def serialize_decimal(self, value: Decimal) -> float:
        return float(value)


class SaleOut(BaseModel):
    id: int
    timestamp: datetime
    client_id: int
    client_name: str
    user_id: int
    user_name: str
    total: Decimal
    discount: Decimal
    items: List[SaleItemOut]

    @field_serializer("total", "discount")
    def serialize_decimal(self, value: Decimal) -> float:
        return float(value)

    @field_serializer("timestamp")
    def serialize_datetime(self, value: datetime) -> str:
        return value.isoformat()


# ***************************************************************
# 3. Salida: comprobante imprimible
# ***************************************************************
class ReceiptClient(BaseModel):
    id: int
    name: str
    dni: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    business_name: Optional[str] = None


class ReceiptLine(BaseModel):
    product_id: int
    code: Optional[str] = None
    description: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal

    @field_serializer("unit_price", "subtotal")
    def serialize_decimal(self, value: Decimal) -> float:
        return float(value)


class Receipt(BaseModel):
    sale_id: int
    timestamp: datetime
    staff_name: str
    client: ReceiptClient
    lines: List[ReceiptLine]
    subtotal: Decimal
    discount: Decimal
    total: Decimal

    @field_serializer("subtotal", "discount", "total")
    def serialize_decimal(self, value: Decimal) -> float:
        return float(value)

    @field_serializer("timestamp")
    def serialize_datetime(self, value: datetime) -> str:
        return value.isoformat()
