"""
db.py — Database Engine & Session Setup
----------------------------------------

This module initializes the SQLAlchemy database connection and provides
session management for the Sentry Jamii reporting app.

Features:
- Creates database engine using DATABASE_URL from project settings
- Defines `SessionLocal` for transaction management
- Provides `init_db()` to create tables based on ORM models

Works against PostgreSQL in deployment and a local SQLite file by default.

Dependencies:
- SQLAlchemy for ORM and engine management
- Project settings for environment-based configuration

"""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker
from config.settings import DATABASE_URL


# --- ORM Base Class ---
Base = declarative_base()

# --- Database Engine ---

engine = create_engine(
    DATABASE_URL
)

if engine.dialect.name == "sqlite":
    # SQLite ignores ON DELETE rules unless foreign keys are switched on per connection
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# --- Session Factory ---
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)


def init_db():
    """
    Initializes the database by creating all tables defined in ORM models.
    Safe to run multiple times; only creates tables if they don't exist.
    """
    # Register models on Base before create_all
    import db.report_model  # noqa: F401
    import db.user_model  # noqa: F401

    Base.metadata.create_all(engine)
