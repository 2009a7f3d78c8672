"""
Fixtures de pytest para el backend de ARLAB.

Cada test obtiene una aplicación nueva sobre SQLite en memoria, con los
roles y categorías sembrados y un administrador inicial.
"""

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from arlab.core.config import Settings
from arlab.core.security import get_password_hash
from arlab.main import create_app
from arlab.models import Client, Product, Sale, SaleItem, User

ADMIN_EMAIL = "admin@arlab.test"
ADMIN_PASSWORD = "admin-secret"
RECEPTION_EMAIL = "recepcion@arlab.test"
RECEPTION_PASSWORD = "recepcion-secret"

ADMIN_ROLE_ID = 1
RECEPTION_ROLE_ID = 2


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        secret_key="test-secret",
        log_level="WARNING",
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        admin_name="Admin Test",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """TestClient como context manager para que corra el lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(client):
    """Sesión directa sobre el almacén de la aplicación, para preparar y verificar datos."""
    session = client.app.state.db.SessionLocal()
    try:
        yield session
    finally:
        session.close()


def _login(client, email, password):
    resp = client.post("/api/v1/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def admin_user(db_session):
    return db_session.query(User).filter(User.email == ADMIN_EMAIL).one()


@pytest.fixture
def reception_user(db_session):
    user = User(
        name="Recepción Test",
        email=RECEPTION_EMAIL,
        password_hash=get_password_hash(RECEPTION_PASSWORD),
        role_id=RECEPTION_ROLE_ID,
        active=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def admin_headers(client, admin_user):
    return _login(client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def reception_headers(client, reception_user):
    return _login(client, RECEPTION_EMAIL, RECEPTION_PASSWORD)


@pytest.fixture
def make_client(db_session):
    def _make(name="Juan Pérez", **kwargs):
        row = Client(name=name, **kwargs)
        db_session.add(row)
        db_session.commit()
        db_session.refresh(row)
        return row
    return _make


@pytest.fixture
def make_product(db_session):
    def _make(description="Hemograma completo", price="100.00", **kwargs):
        row = Product(description=description, price=Decimal(price), **kwargs)
        db_session.add(row)
        db_session.commit()
        db_session.refresh(row)
        return row
    return _make


@pytest.fixture
def make_sale(db_session):
    """Inserta una venta ya confirmada; `items` = [(producto, cantidad, precio), ...]."""
    def _make(client_row, user, items, timestamp=None, discount="0"):
        total = sum(Decimal(price) * qty for _, qty, price in items) - Decimal(discount)
        sale = Sale(
            client_id=client_row.id,
            user_id=user.id,
            total=total,
            discount=Decimal(discount),
            timestamp=timestamp or datetime.now(),
        )
        db_session.add(sale)
        db_session.flush()
        for product, qty, price in items:
            db_session.add(SaleItem(
                sale_id=sale.id, product_id=product.id, quantity=qty, unit_price=Decimal(price),
            ))
        db_session.commit()
        db_session.refresh(sale)
        return sale
    return _make
