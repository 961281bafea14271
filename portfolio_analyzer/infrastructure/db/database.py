"""
Database Configuration
SQLAlchemy setup, built from explicit Settings
"""

import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from portfolio_analyzer.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models"""
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine for the configured database URL.

    SQLite connections get foreign key enforcement so position rows
    cascade with their portfolio.
    """
    url = settings.DATABASE_URL
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)

    engine = create_engine(
        url,
        echo=settings.DB_ECHO,
        pool_pre_ping=True,
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    logger.info("Database engine created | url=%s", url)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


def init_db(engine: Engine) -> None:
    """
    Initialize database schema in an idempotent manner.
    """
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))

    # Import models so metadata is populated
    from portfolio_analyzer.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
