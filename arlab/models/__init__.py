# arlab/models/__init__.py
# Importar todos los modelos para que SQLAlchemy los registre

from arlab.models.auth import Role, User  # noqa: F401
from arlab.models.clients import Client  # noqa: F401
from arlab.models.inventory import Category, Product  # noqa: F401
from arlab.models.sales import Sale, SaleItem  # noqa: F401
