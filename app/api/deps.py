# app/api/deps.py
from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.term_service import TermContext, get_active_term
from app.db.session import SessionLocal


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_term_context(db: Session = Depends(get_db)) -> TermContext:
    """Active term, resolved once per request and handed to the ledger."""
    return get_active_term(db)
