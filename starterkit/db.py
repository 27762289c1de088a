from __future__ import annotations

from sqlalchemy import Engine, create_engine, event, inspect
from sqlalchemy.orm import sessionmaker

from starterkit.config import DB_CONNECTION_STRING, LOGGER
from starterkit.models import register_models


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """
    SQLite ignores REFERENCES clauses unless each connection turns them on.
    Other backends enforce foreign keys already and are left alone.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()


engine = create_engine(DB_CONNECTION_STRING)
enable_sqlite_foreign_keys(engine)
Session = sessionmaker(engine)

_db_initialized = False


def initialize_database() -> bool:
    """
    Create any starterkit tables the database is missing.
    Existing tables are never altered. Call once at startup.
    """
    global _db_initialized

    if _db_initialized:
        return True

    try:
        tables = [model.__table__ for model in register_models()]
        existing = set(inspect(engine).get_table_names())
        missing = [table for table in tables if table.name not in existing]

        if missing:
            names = ", ".join(table.name for table in missing)
            LOGGER.info(f"Creating missing database tables: {names}")
            # Dependency order is resolved by create_all
            missing[0].metadata.create_all(bind=engine, tables=missing)
            LOGGER.info("Database tables created successfully")
        else:
            LOGGER.debug(f"Database already has all {len(tables)} starterkit tables")

        _db_initialized = True
        return True
    except Exception as e:
        LOGGER.error(f"Error initializing database: {e}")
        return False
