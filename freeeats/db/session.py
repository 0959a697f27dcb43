"""Database session management."""
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from freeeats.config.settings import Settings, settings


def build_engine(config: Settings) -> Engine:
    """Create the engine; pool sizing only applies to server databases."""
    if config.is_sqlite():
        return create_engine(
            config.DATABASE_URL,
            echo=config.DATABASE_ECHO,
            connect_args={"check_same_thread": False},
        )
    return create_engine(
        config.DATABASE_URL,
        pool_pre_ping=True,
        echo=config.DATABASE_ECHO,
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_POOL_OVERFLOW,
    )


engine = build_engine(settings)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function that yields a database session.

    Usage in FastAPI endpoints:
        @router.get("/items/")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
