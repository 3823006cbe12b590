# /app/db/database.py

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from app.core.config import settings

DATABASE_URL = settings.DATABASE_URL

# The 'check_same_thread' argument is only needed for SQLite.
engine_args = {"connect_args": {"check_same_thread": False}} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, echo=settings.DB_ECHO, **engine_args)


def enable_sqlite_foreign_keys(target_engine) -> None:
    """SQLite ignores foreign keys unless asked per connection."""
    if target_engine.dialect.name != "sqlite":
        return

    @event.listens_for(target_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


enable_sqlite_foreign_keys(engine)

# Each instance of this class is a database session.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency to get a DB session. Used by the DatabaseService provider.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
