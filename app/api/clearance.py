# app/api/clearance.py
import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_term_context
from app.core.term_service import TermContext
from app.crud import clearance as crud_clearance
from app.schemas.clearance import ClearAllOut, SectionStatusOut, StudentStatusOut, UpdateStatusRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/section/{section_id}/subject/{requirement_id}", response_model=SectionStatusOut)
def read_section_status(
    section_id: int,
    requirement_id: int,
    db: Session = Depends(get_db),
    term: TermContext = Depends(get_term_context),
):
    roster, active = crud_clearance.status_for_section(db, section_id, requirement_id, term)
    return SectionStatusOut(
        students=[
            StudentStatusOut(
                user_id=student.id,
                student_id=student.student_id,
                first_name=student.first_name,
                middle_name=student.middle_name,
                last_name=student.last_name,
                is_cleared=is_cleared,
            )
            for student, is_cleared in roster
        ],
        school_year=active.school_year,
        term=active.term_number,
        term_name=active.term_name,
        requirement_id=requirement_id,
        section_id=section_id,
    )


@router.put("/status", status_code=status.HTTP_204_NO_CONTENT)
def update_status(
    request: UpdateStatusRequest,
    db: Session = Depends(get_db),
    term: TermContext = Depends(get_term_context),
):
    crud_clearance.set_status(
        db,
        request.user_id,
        request.requirement_id,
        request.school_year,
        request.term,
        request.is_cleared,
        active_term=term,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/section/{section_id}/subject/{requirement_id}/clear-all", response_model=ClearAllOut)
def clear_all(
    section_id: int,
    requirement_id: int,
    db: Session = Depends(get_db),
    term: TermContext = Depends(get_term_context),
):
    logger.info(f"🚀 Clear-all requested: section={section_id}, requirement={requirement_id}")
    cleared, active = crud_clearance.clear_all_uncleared(db, section_id, requirement_id, term)
    return ClearAllOut(cleared_count=cleared, school_year=active.school_year, term=active.term_number)
