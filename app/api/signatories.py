# app/api/signatories.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.crud import assignment as crud_assignment
from app.crud import signatory as crud_signatory
from app.schemas.common import MessageOut
from app.schemas.signatory import AssignedItemOut, SignatoryCreate, SignatoryOut, SignatoryUpdate

router = APIRouter()

KIND = "signatory"


@router.get("", response_model=List[SignatoryOut])
def read_signatories(db: Session = Depends(get_db)):
    return crud_signatory.list_signatories(db, KIND)


@router.post("", response_model=SignatoryOut, status_code=status.HTTP_201_CREATED)
def create_signatory(signatory_in: SignatoryCreate, db: Session = Depends(get_db)):
    return crud_signatory.create_signatory(db, signatory_in, kind=KIND)


@router.get("/{signatory_id}", response_model=SignatoryOut)
def read_signatory(signatory_id: int, db: Session = Depends(get_db)):
    return crud_signatory.get_signatory(db, signatory_id, KIND)


@router.get("/{signatory_id}/assignments", response_model=List[AssignedItemOut])
def read_signatory_assignments(signatory_id: int, db: Session = Depends(get_db)):
    assignments = crud_assignment.assigned_items_for(db, signatory_id, KIND)
    return [
        AssignedItemOut(
            assignment_id=a.id,
            requirement_id=a.requirement_id,
            name=a.requirement.name,
            type=a.requirement.display_type,
        )
        for a in assignments
    ]


@router.put("/{signatory_id}", response_model=SignatoryOut)
def update_signatory(signatory_id: int, signatory_in: SignatoryUpdate, db: Session = Depends(get_db)):
    return crud_signatory.update_signatory(db, signatory_id, signatory_in, KIND)


@router.delete("/{signatory_id}", response_model=MessageOut)
def delete_signatory(signatory_id: int, db: Session = Depends(get_db)):
    crud_signatory.delete_signatory(db, signatory_id, KIND)
    return {"message": "Signatory deleted"}
