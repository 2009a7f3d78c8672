# arlab/models/inventory.py
# type: ignore

from sqlalchemy import Column, Integer, String, ForeignKey, Numeric
from sqlalchemy.orm import relationship

from arlab.database import Base


class Category(Base):
    """Categoría de análisis (solo lectura, se siembra al iniciar)."""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)


class Product(Base):
    """Análisis de laboratorio ofrecido a la venta."""
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(50), index=True, nullable=True)
    description = Column(String(255), nullable=False)

    # NUMERIC(10,2) para precisión financiera
    price = Column(Numeric(10, 2), nullable=False, default=0)
    # Informativo: las ventas no descuentan stock
    stock = Column(Integer, nullable=False, default=0)

    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)

    category = relationship("Category", lazy="joined")

    @property
    def category_name(self):
        return self.category.name if self.category else None
