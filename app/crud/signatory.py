# app/crud/signatory.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.errors import Conflict, NotFound, ValidationFailed
from app.core.security import get_password_hash
from app.db.models.signatory import Signatory
from app.db.session import commit_or_raise
from app.schemas.signatory import SignatoryCreate, SignatoryUpdate

logger = logging.getLogger(__name__)

NAME_FIELDS = ("first_name", "last_name", "username")


def _label(kind: Optional[str]) -> str:
    return "Faculty member" if kind == "faculty" else "Signatory"


def full_name(first_name: str, middle_name: Optional[str], last_name: str) -> str:
    return " ".join(part for part in (first_name, middle_name, last_name) if part)


def list_signatories(db: Session, kind: Optional[str] = None) -> List[Signatory]:
    query = db.query(Signatory)
    if kind:
        query = query.filter(Signatory.kind == kind)
    return query.order_by(Signatory.name).all()


def get_signatory(db: Session, signatory_id: int, kind: Optional[str] = None) -> Signatory:
    query = db.query(Signatory).filter(Signatory.id == signatory_id)
    if kind:
        query = query.filter(Signatory.kind == kind)
    signatory = query.first()
    if not signatory:
        raise NotFound(f"{_label(kind)} {signatory_id} not found")
    return signatory


def _validate(fields: dict) -> dict:
    cleaned = dict(fields)
    for field in NAME_FIELDS + ("name",):
        if field in cleaned:
            value = (cleaned[field] or "").strip()
            if not value:
                raise ValidationFailed(f"{field} must not be blank")
            cleaned[field] = value
    if "middle_name" in cleaned:
        cleaned["middle_name"] = (cleaned["middle_name"] or "").strip() or None
    return cleaned


def _ensure_username_free(db: Session, username: str, own_id: Optional[int] = None) -> None:
    existing = db.query(Signatory).filter(Signatory.username == username).first()
    if existing and existing.id != own_id:
        raise Conflict(f"Username {username} is already taken")


def create_signatory(db: Session, signatory_in: SignatoryCreate, kind: str = "signatory") -> Signatory:
    if not signatory_in.password:
        raise ValidationFailed("password must not be blank")
    fields = _validate(signatory_in.model_dump(exclude={"password"}, exclude_none=True))
    _ensure_username_free(db, fields["username"])
    fields.setdefault("name", full_name(fields["first_name"], fields.get("middle_name"), fields["last_name"]))

    signatory = Signatory(
        kind=kind,
        hashed_password=get_password_hash(signatory_in.password),
        **fields,
    )
    db.add(signatory)
    commit_or_raise(db, f"Username {fields['username']} is already taken")
    db.refresh(signatory)
    logger.info(f"Created {kind} {signatory.id}: {signatory.name}")
    return signatory


def update_signatory(db: Session, signatory_id: int, signatory_in: SignatoryUpdate,
                     kind: Optional[str] = None) -> Signatory:
    signatory = get_signatory(db, signatory_id, kind)
    fields = _validate(signatory_in.model_dump(exclude={"password"}, exclude_unset=True))
    if "username" in fields:
        _ensure_username_free(db, fields["username"], own_id=signatory.id)

    for field, value in fields.items():
        setattr(signatory, field, value)
    if signatory_in.password:
        signatory.hashed_password = get_password_hash(signatory_in.password)

    commit_or_raise(db, f"Username {signatory.username} is already taken")
    db.refresh(signatory)
    return signatory


def delete_signatory(db: Session, signatory_id: int, kind: Optional[str] = None) -> None:
    """Delete the actor and its assignments. Clearance records stay."""
    signatory = get_signatory(db, signatory_id, kind)
    db.delete(signatory)
    commit_or_raise(db)
    logger.info(f"Deleted {signatory.kind} {signatory_id}")
