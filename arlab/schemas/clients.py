# arlab/schemas/clients.py
# type: ignore

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class ClientBase(BaseModel):
    dni: Optional[str] = Field(None, max_length=20)
    name: str = Field(..., max_length=150)
    phone: Optional[str] = Field(None, max_length=30)
    address: Optional[str] = Field(None, max_length=255)
    business_name: Optional[str] = Field(None, max_length=150, description="Razón social para facturar")

    model_config = ConfigDict(from_attributes=True)

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("El nombre es requerido.")
        return value


class ClientCreate(ClientBase):
    pass


class ClientUpdate(ClientBase):
    """PUT reemplaza todos los campos, igual que la creación."""
    pass


class ClientInDB(ClientBase):
    id: int
    created_at: Optional[datetime] = None

    @field_serializer("created_at")
    def serialize_datetime(self, value: Optional[datetime]) -> Optional[str]:
        return value.isoformat() if value else None


class ClientDeleted(BaseModel):
    message: str
    client: ClientInDB
