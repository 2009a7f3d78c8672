# arlab/schemas/inventory.py
# type: ignore

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# -------------------------------------------------------------------
# Categorías
# -------------------------------------------------------------------


class CategoryInDB(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


# -------------------------------------------------------------------
# Productos (análisis)
# -------------------------------------------------------------------

class ProductBase(BaseModel):
    code: Optional[str] = Field(None, max_length=50)
    description: str = Field(..., max_length=255)
    price: Decimal = Field(Decimal("0"), ge=0, decimal_places=2, description="Precio de venta")
    stock: int = Field(0, ge=0)
    category_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("description")
    @classmethod
    def description_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("La descripción es requerida.")
        return value

    @field_validator("category_id")
    @classmethod
    def zero_means_no_category(cls, value: Optional[int]) -> Optional[int]:
        # El formulario envía 0 cuando no se eligió categoría
        return value or None

    # Serializador: convierte Decimal a float para la salida JSON
    @field_serializer("price")
    def serialize_decimal(self, value: Decimal) -> float:
        return float(value)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    pass


class ProductInDB(ProductBase):
    id: int
    category_name: Optional[str] = None


class ProductDeleted(BaseModel):
    message: str
    product: ProductInDB
