"""
Database engine and per-request sessions for Staybook.

SQLite URLs (the default) are opened with check_same_thread off so
sessions can be used from FastAPI worker threads; MySQL URLs go
through pymysql. init_db creates the users, places, place_photos and
bookings tables.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from staybook.core.config import settings
from staybook.db.base import Base

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=True,
    pool_recycle=3600,
    connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Initialize database tables."""
    # Register all models on Base.metadata
    import staybook.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
