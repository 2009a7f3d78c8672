# arlab/core/errors.py

from sqlalchemy.exc import IntegrityError

# SQLSTATE de PostgreSQL para "foreign_key_violation"
PG_FOREIGN_KEY_VIOLATION = "23503"
# Código extendido de SQLite para SQLITE_CONSTRAINT_FOREIGNKEY
SQLITE_CONSTRAINT_FOREIGNKEY = 787


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """
    Indica si un IntegrityError proviene de una violación de llave foránea.

    Se inspecciona el código estructurado de la excepción original del driver
    (psycopg2 expone `pgcode`, psycopg 3 `sqlstate`, sqlite3 `sqlite_errorcode`).
    """
    orig = getattr(exc, "orig", None)
    if orig is None:
        return False

    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code is not None:
        return code == PG_FOREIGN_KEY_VIOLATION

    if getattr(orig, "sqlite_errorcode", None) == SQLITE_CONSTRAINT_FOREIGNKEY:
        return True

    # Sin código extendido, SQLite solo distingue la restricción por su mensaje
    return "FOREIGN KEY constraint failed" in str(orig)
