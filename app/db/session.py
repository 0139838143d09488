# app/db/session.py
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings
from app.core.errors import Conflict, UpstreamFailure

logger = logging.getLogger(__name__)

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)


@event.listens_for(engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if settings.DATABASE_URL.startswith("sqlite"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def commit_or_raise(db: Session, conflict_message: str = "Integrity constraint violated") -> None:
    """Commit, rolling back and translating datastore errors into engine errors."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise Conflict(conflict_message) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Commit failed")
        raise UpstreamFailure("Database error, please retry") from exc
