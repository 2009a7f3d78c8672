# arlab/api/v1/endpoints/health.py
# type: ignore

import logging

from fastapi import APIRouter, HTTPException, Request, status
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health(request: Request):
    """Comprueba que el backend responde y que la base de datos es accesible."""
    try:
        request.app.state.db.ping()
    except SQLAlchemyError:
        logger.exception("Error al conectar con la BD")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Error de conexión a la base de datos."
        )
    return {"status": "ok"}
