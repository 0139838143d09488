# app/schemas/settings.py
from pydantic import BaseModel

from app.schemas.common import CamelModel


class AppSettings(BaseModel):
    active_school_year: str
    active_quarter_jhs: str
    active_semester_shs: str


class ActiveTermOut(CamelModel):
    school_year: str
    term_name: str  # "Quarter" / "Semester"
    term_number: str
