# app/api/reports.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_term_context
from app.core.term_service import TermContext
from app.crud import report as crud_report
from app.schemas.report import FullyClearedReport, FullyClearedStudentOut

router = APIRouter()


@router.get("/fully-cleared", response_model=FullyClearedReport)
def read_fully_cleared(
    grade_level_id: Optional[int] = Query(None, alias="gradeLevelId"),
    section_id: Optional[int] = Query(None, alias="sectionId"),
    db: Session = Depends(get_db),
    term: TermContext = Depends(get_term_context),
):
    students = crud_report.fully_cleared_students(
        db, term, grade_level_id=grade_level_id, section_id=section_id
    )
    return FullyClearedReport(
        students=[
            FullyClearedStudentOut(
                user_id=s.id,
                student_id=s.student_id,
                first_name=s.first_name,
                middle_name=s.middle_name,
                last_name=s.last_name,
                grade_level=s.section.grade_level.name,
                section_name=s.section.name,
            )
            for s in students
        ],
        total_count=len(students),
    )
