# arlab/services/sales.py
"""
Registro de ventas: la cabecera y todas sus líneas se guardan como una
única unidad (todo o nada).
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from arlab.models.sales import Sale, SaleItem
from arlab.schemas.sales import SaleCreate

logger = logging.getLogger(__name__)


class SaleError(Exception):
    """La transacción de venta falló y se deshizo por completo."""


def register_sale(db: Session, sale_in: SaleCreate) -> int:
    """
    Inserta la venta y sus líneas en una sola transacción y devuelve el ID.

    La sesión mantiene una única conexión del pool durante toda la
    transacción. Si cualquier INSERT falla se hace ROLLBACK y se lanza
    SaleError; la sesión la cierra `get_db` en todos los casos.
    """
    try:
        # 1. Cabecera
        sale = Sale(
            client_id=sale_in.client_id,
            user_id=sale_in.user_id,
            total=sale_in.total,
            discount=sale_in.discount,
        )
        db.add(sale)
        db.flush()
        sale_id = sale.id

        # 2. Detalle, en el orden recibido
        for item in sale_in.items:
            db.add(SaleItem(
                sale_id=sale_id,
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=item.unit_price,
            ))
            db.flush()

        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error en transacción de venta (cliente=%s, usuario=%s)",
                         sale_in.client_id, sale_in.user_id)
        raise SaleError("Error al procesar la venta.") from e

    logger.info("Venta %s registrada: %d items, total %s",
                sale_id, len(sale_in.items), sale_in.total)
    return sale_id
