# arlab/main.py
# type: ignore

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from arlab.core.config import DEFAULT_CORS_ORIGINS, Settings
from arlab.core.logging_config import configure_logging
from arlab.database import Database
from arlab.initial_data import init_db

# ***************************************************************
# 1. Importar los Routers de API
# ***************************************************************
from arlab.api.v1.endpoints import auth
from arlab.api.v1.endpoints import categories
from arlab.api.v1.endpoints import clients
from arlab.api.v1.endpoints import health
from arlab.api.v1.endpoints import products
from arlab.api.v1.endpoints import reports
from arlab.api.v1.endpoints import roles
from arlab.api.v1.endpoints import sales
from arlab.api.v1.endpoints import users

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


# ***************************************************************
# 2. Ciclo de vida: abrir el almacén al iniciar, cerrarlo al apagar
# ***************************************************************
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    if settings is None:
        settings = app.state.settings = Settings.from_env()
    configure_logging(settings.log_level)

    db = Database(settings.database_url)
    db.create_tables()
    session = db.SessionLocal()
    try:
        init_db(session, settings)
    finally:
        session.close()

    app.state.db = db
    logger.info("Backend de ARLAB iniciado.")
    try:
        yield
    finally:
        db.dispose()


# ***************************************************************
# 3. Traducción de errores a respuestas JSON {"detail": ...}
# ***************************************************************
def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Datos inválidos."

    error = errors[0]
    field = ".".join(str(part) for part in error["loc"] if part not in ("body", "query", "path"))
    if not field:
        return "El cuerpo de la solicitud es requerido o no es JSON válido."
    if error["type"] == "missing":
        return f"El campo '{field}' es requerido."

    # Mensajes propios de los validadores (ValueError) se devuelven tal cual
    ctx_error = error.get("ctx", {}).get("error")
    if isinstance(ctx_error, Exception):
        return str(ctx_error)
    return f"Valor inválido para '{field}': {error['msg']}"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": _validation_message(exc)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Error no controlado en %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Error interno del servidor."},
    )


# ***************************************************************
# 4. Fábrica de la aplicación
# ***************************************************************
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Construye la aplicación. Sin `settings` se leen del entorno al arrancar
    (DATABASE_URL es obligatoria).
    """
    app = FastAPI(
        title="ARLAB Backend API",
        version="v1",
        description="Backend del punto de venta del laboratorio clínico (clientes, análisis, ventas y reportes).",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins if settings else list(DEFAULT_CORS_ORIGINS),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health.router, tags=["Health"], prefix=API_PREFIX)
    app.include_router(auth.router, tags=["Auth"], prefix=f"{API_PREFIX}/auth")
    app.include_router(clients.router, tags=["Clients"], prefix=f"{API_PREFIX}/clients")
    app.include_router(products.router, tags=["Products"], prefix=f"{API_PREFIX}/products")
    app.include_router(categories.router, tags=["Categories"], prefix=f"{API_PREFIX}/categories")
    app.include_router(roles.router, tags=["Roles"], prefix=f"{API_PREFIX}/roles")
    app.include_router(users.router, tags=["Users"], prefix=f"{API_PREFIX}/users")
    app.include_router(sales.router, tags=["Sales"], prefix=f"{API_PREFIX}/sales")
    app.include_router(reports.router, tags=["Reports"], prefix=f"{API_PREFIX}/reports")

    return app


app = create_app()
