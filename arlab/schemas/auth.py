# arlab/schemas/auth.py
#type: ignore

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


# ***************************************************************
# 1. Schemas de Autenticación
# ***************************************************************
class UserLogin(BaseModel):
    """Schema para la solicitud de login (la obligatoriedad se valida en el endpoint)."""
    email: Optional[str] = None
    password: Optional[str] = None


class LoginUser(BaseModel):
    """Datos públicos del usuario que se devuelven al iniciar sesión."""
    id: int
    name: str
    email: str
    role_id: int
    role_name: str


class LoginResponse(BaseModel):
    message: str
    user: LoginUser
    token: str
    token_type: str = "bearer"


class TokenPayload(BaseModel):
    """Carga útil del token firmado (sin expiración)."""
    sub: Optional[str] = None
    role: Optional[str] = None


# ***************************************************************
# 2. Schemas de Usuario (Request/Response)
# ***************************************************************
class UserBase(BaseModel):
    """Base para la creación y lectura de usuarios."""
    name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=255)
    role_id: int
    active: bool = True

    model_config = ConfigDict(from_attributes=True)

    @field_validator("name", "email")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("El nombre y el email son requeridos.")
        return value


class UserCreate(UserBase):
    """Schema para la creación de un nuevo usuario (la contraseña es obligatoria)."""
    password: str = Field(..., min_length=1)


class UserUpdate(UserBase):
    """Actualización completa; sin `password` (o vacía) se conserva la actual."""
    password: Optional[str] = None


class UserInDB(UserBase):
    """Representación del usuario desde la DB (nunca incluye el hash)."""
    id: int
    role_name: str
    created_at: Optional[datetime] = None

    @field_serializer("created_at")
    def serialize_datetime(self, value: Optional[datetime]) -> Optional[str]:
        return value.isoformat() if value else None


# ***************************************************************
# 3. Schemas de Rol
# ***************************************************************
class RoleInDB(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
