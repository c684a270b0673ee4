import logging

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from biztime.api.core.config import settings

logger = logging.getLogger(__name__)


# ----------------------------------------------------
# 1. FOREIGN KEYS FOR SQLITE
# ----------------------------------------------------
def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """
    SQLite ignores FOREIGN KEY clauses unless the pragma is set on every
    connection. Other dialects enforce them already.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ----------------------------------------------------
# 2. CREATE ENGINE
# ----------------------------------------------------
connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=connect_args,
    echo=settings.SQL_ECHO,
)
enable_sqlite_foreign_keys(engine)

# ----------------------------------------------------
# 3. SESSION FACTORY
# ----------------------------------------------------
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ----------------------------------------------------
# 4. BASE CLASS FOR ALL MODELS
# ----------------------------------------------------
Base = declarative_base()


# ----------------------------------------------------
# 5. DEPENDENCY FOR FASTAPI
# ----------------------------------------------------
def get_db():
    """
    FastAPI dependency: yields a DB session.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ----------------------------------------------------
# 6. TABLE CREATION
# ----------------------------------------------------
def table_exists(table_name: str, bind: Engine = engine) -> bool:
    return table_name in inspect(bind).get_table_names()


def init_db(bind: Engine = engine) -> None:
    """
    Creates the companies and invoices tables when missing.
    Existing tables are left as they are.
    """
    from biztime.api.models.company_model import Company  # noqa: F401
    from biztime.api.models.invoice_model import Invoice  # noqa: F401

    missing = [
        name for name in ("companies", "invoices") if not table_exists(name, bind)
    ]
    Base.metadata.create_all(bind=bind)
    if missing:
        logger.info("Created tables: %s", ", ".join(missing))
