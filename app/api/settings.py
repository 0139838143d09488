# app/api/settings.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_term_context
from app.core import term_service
from app.core.term_service import TermContext
from app.crud.section import get_grade_level
from app.schemas.settings import ActiveTermOut, AppSettings

router = APIRouter()


def to_app_settings(term: TermContext) -> AppSettings:
    return AppSettings(
        active_school_year=term.school_year,
        active_quarter_jhs=term.quarter,
        active_semester_shs=term.semester,
    )


@router.get("", response_model=AppSettings)
def read_settings(term: TermContext = Depends(get_term_context)):
    return to_app_settings(term)


@router.put("", response_model=AppSettings)
def update_settings(settings_in: AppSettings, db: Session = Depends(get_db)):
    term = term_service.update_active_term(
        db,
        settings_in.active_school_year.strip(),
        settings_in.active_quarter_jhs.strip(),
        settings_in.active_semester_shs.strip(),
    )
    return to_app_settings(term)


@router.get("/active-term", response_model=ActiveTermOut)
def read_active_term(
    grade_level_id: Optional[int] = Query(None, alias="gradeLevelId"),
    db: Session = Depends(get_db),
    term: TermContext = Depends(get_term_context),
):
    # Without a grade level, report the junior high (quarter) view
    if grade_level_id is None:
        return ActiveTermOut(school_year=term.school_year, term_name="Quarter", term_number=term.quarter)
    active = term.for_grade(get_grade_level(db, grade_level_id))
    return ActiveTermOut(
        school_year=active.school_year,
        term_name=active.term_name,
        term_number=active.term_number,
    )
