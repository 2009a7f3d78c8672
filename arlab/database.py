# arlab/database.py

import logging

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# Clase base de la que heredan todos los modelos/tablas.
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite no valida llaves foráneas salvo que se active por conexión
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Manejador del almacén: engine (pool de conexiones) + fábrica de sesiones.

    Se construye al arrancar la aplicación y se cierra al apagarla;
    los endpoints lo reciben a través de `get_db`.
    """

    def __init__(self, database_url: str):
        engine_kwargs = {}
        is_sqlite = database_url.startswith("sqlite")

        if is_sqlite:
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            # Base en memoria: todas las sesiones deben compartir la misma conexión
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True

        self.engine = create_engine(database_url, **engine_kwargs)
        if is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        # Una sesión por solicitud (request) a la API.
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_tables(self) -> None:
        """Crea todas las tablas de la base de datos si no existen."""
        # Importar los modelos para que SQLAlchemy los registre
        import arlab.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self) -> None:
        logger.info("Cerrando el pool de conexiones.")
        self.engine.dispose()


# Función de dependencia (Dependency Injection) para obtener una sesión de DB
def get_db(request: Request):
    """Provee una sesión del almacén de la aplicación a un endpoint de FastAPI."""
    db = request.app.state.db.SessionLocal()
    try:
        yield db
    finally:
        db.close()
