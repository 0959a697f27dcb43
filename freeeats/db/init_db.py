"""Database initialization utilities."""
import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from freeeats.db.base import Base
from freeeats.db.campus_data import CAMPUSES
from freeeats.models import Campus

logger = logging.getLogger(__name__)


def create_tables(bind: Engine) -> None:
    """
    Create all tables that do not exist yet.

    Suitable for development and tests; production schemas are managed
    with migrations.
    """
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables ensured")


def seed_campuses(db: Session) -> int:
    """
    Load the static campus directory. A no-op once any campus exists.

    Returns:
        Number of campuses inserted
    """
    if db.query(Campus.id).first() is not None:
        logger.info("Campuses already seeded")
        return 0

    db.add_all(
        Campus(name=name, city=city, state=state, latitude=lat, longitude=lng)
        for name, city, state, lat, lng in CAMPUSES
    )
    db.commit()
    logger.info(f"Seeded {len(CAMPUSES)} campuses")
    return len(CAMPUSES)


def init_db(bind: Optional[Engine] = None, seed: bool = True) -> None:
    """Create tables and optionally seed reference data."""
    from freeeats.db.session import SessionLocal, engine

    bind = bind or engine
    try:
        create_tables(bind)
        if seed:
            db = SessionLocal(bind=bind)
            try:
                seed_campuses(db)
            finally:
                db.close()
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise
