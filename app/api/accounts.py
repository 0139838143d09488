# app/api/accounts.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.crud import requirement as crud_requirement
from app.db.models.requirement import ACCOUNT
from app.schemas.common import MessageOut
from app.schemas.requirement import AccountCreate, RequirementOut, RequirementUpdate, to_requirement_out

router = APIRouter()


@router.get("", response_model=List[RequirementOut])
def read_accounts(db: Session = Depends(get_db)):
    return [to_requirement_out(r) for r in crud_requirement.list_requirements(db, ACCOUNT)]


@router.post("", response_model=RequirementOut, status_code=status.HTTP_201_CREATED)
def create_account(account_in: AccountCreate, db: Session = Depends(get_db)):
    # Accounts are not curriculum-scoped: a name is all they carry
    return to_requirement_out(crud_requirement.create_requirement(db, ACCOUNT, account_in.name))


@router.put("/{account_id}", response_model=RequirementOut)
def update_account(account_id: int, account_in: RequirementUpdate, db: Session = Depends(get_db)):
    return to_requirement_out(
        crud_requirement.update_requirement(db, account_id, account_in.name, ACCOUNT)
    )


@router.delete("/{account_id}", response_model=MessageOut)
def delete_account(account_id: int, db: Session = Depends(get_db)):
    crud_requirement.delete_requirement(db, account_id, ACCOUNT)
    return {"message": "Account deleted"}
