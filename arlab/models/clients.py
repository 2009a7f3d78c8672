# arlab/models/clients.py
# type: ignore

from datetime import datetime

from sqlalchemy import Column, Integer, String, TIMESTAMP

from arlab.database import Base


class Client(Base):
    """Paciente/cliente del laboratorio."""
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True)
    dni = Column(String(20), index=True, nullable=True)
    name = Column(String(150), index=True, nullable=False)
    phone = Column(String(30), nullable=True)
    address = Column(String(255), nullable=True)
    # Razón social para la facturación
    business_name = Column(String(150), nullable=True)
    created_at = Column(TIMESTAMP, default=datetime.now)
