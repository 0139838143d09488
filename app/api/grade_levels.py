# app/api/grade_levels.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.crud import section as crud_section
from app.schemas.section import GradeLevelOut

router = APIRouter()


@router.get("", response_model=List[GradeLevelOut])
def read_grade_levels(db: Session = Depends(get_db)):
    return crud_section.list_grade_levels(db)
