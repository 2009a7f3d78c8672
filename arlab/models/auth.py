# arlab/models/auth.py
# type: ignore

from datetime import datetime

from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, TIMESTAMP
from sqlalchemy.orm import relationship

from arlab.database import Base

# Nombres de los roles sembrados al iniciar (ver arlab/initial_data.py)
ROLE_ADMIN = "admin"
ROLE_RECEPTION = "reception"


class Role(Base):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), index=True, unique=True, nullable=False)

    users = relationship("User", back_populates="role")


class User(Base):
    """Cuenta del personal (administración o recepción)."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    # El email es la llave de login
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)

    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False)

    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(TIMESTAMP, default=datetime.now)

    role = relationship("Role", back_populates="users", lazy="joined")
