# arlab/models/sales.py
# type: ignore

from datetime import datetime

from sqlalchemy import Column, Integer, ForeignKey, Numeric, TIMESTAMP
from sqlalchemy.orm import relationship

from arlab.database import Base


class Sale(Base):
    """
    Cabecera de venta. Inmutable una vez confirmada.

    Las relaciones son solo de ida (Sale -> Client/User): borrar un cliente
    con ventas debe fallar en la base de datos por la llave foránea.
    """
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)
    timestamp = Column(TIMESTAMP, default=datetime.now, nullable=False, index=True)

    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    total = Column(Numeric(10, 2), nullable=False)
    discount = Column(Numeric(10, 2), nullable=False, default=0)

    client = relationship("Client")
    user = relationship("User")
    items = relationship("SaleItem", back_populates="sale", order_by="SaleItem.id")


class SaleItem(Base):
    """Línea de venta con el precio copiado al momento de vender."""
    __tablename__ = "sale_items"

    id = Column(Integer, primary_key=True, index=True)
    sale_id = Column(Integer, ForeignKey("sales.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)

    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)

    sale = relationship("Sale", back_populates="items")
    product = relationship("Product")
