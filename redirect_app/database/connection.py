"""
Database engine, session factory and declarative base.

The engine owns a bounded connection pool shared by all requests.
Each request gets its own session through the get_db dependency.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from redirect_app.config import settings


def build_engine(database_url: str):
    """Create an engine for the given URL.

    SQLite needs check_same_thread disabled because FastAPI may run
    dependencies and handlers on different threads. Server databases
    get an explicitly bounded pool.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            echo=settings.db_echo,
        )
    return create_engine(
        database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        echo=settings.db_echo,
    )


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Yield a database session and close it after the request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
