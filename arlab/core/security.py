# arlab/core/security.py
# type: ignore
from typing import Any, Union

from fastapi import HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError
from passlib.context import CryptContext
from pydantic import ValidationError

from arlab.core.config import Settings
from arlab.schemas.auth import TokenPayload

# ***************************************************************
# 1. Configuración de Seguridad
# ***************************************************************

# Contexto para hashing de contraseñas (pbkdf2_sha256)
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# Esquema de autenticación para FastAPI (para endpoints protegidos)
reusable_oauth2 = OAuth2PasswordBearer(
    tokenUrl="/api/v1/auth/login",  # Endpoint donde se obtiene el token
    auto_error=False,
)

# ***************************************************************
# 2. Funciones de Hashing de Contraseñas
# ***************************************************************

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verifica si una contraseña en texto plano coincide con el hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Genera el hash de una contraseña en texto plano."""
    return pwd_context.hash(password)

# ***************************************************************
# 3. Emisión y verificación del token
# ***************************************************************

def create_access_token(subject: Union[str, Any], role: str, settings: Settings) -> str:
    """
    Crea el token firmado que se entrega en el login.

    No lleva `exp`: el token no caduca ni se revoca (no hay ciclo de vida de sesión).
    """
    to_encode = {"sub": str(subject), "role": role}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str, settings: Settings) -> TokenPayload:
    """Decodifica y valida un token. Lanza HTTPException 401 si falla."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
        return TokenPayload(**payload)
    except (JWTError, ValidationError, TypeError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciales inválidas.",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
