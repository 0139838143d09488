# app/db/init_db.py
import logging

from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.base import Base
from app.db.models import GradeLevel

logger = logging.getLogger(__name__)


def init_db(db: Session) -> None:
    """Create missing tables and seed the grade level band."""
    Base.metadata.create_all(bind=db.get_bind())

    existing = {name for (name,) in db.query(GradeLevel.name).all()}
    missing = [name for name in settings.GRADE_LEVELS if name not in existing]
    for name in missing:
        db.add(GradeLevel(name=name))
    if missing:
        db.commit()
        logger.info(f"Seeded grade levels: {', '.join(missing)}")
