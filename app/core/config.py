# app/core/config.py
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./clearance.db"
    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    RELOAD: bool = False

    CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://127.0.0.1",
        "http://localhost:3000",
        "http://10.0.2.2:3000",
    ]

    # Grade bands: everything below SENIOR_HIGH_START_GRADE runs on quarters
    GRADE_LEVELS: List[str] = [
        "Grade 7", "Grade 8", "Grade 9", "Grade 10", "Grade 11", "Grade 12",
    ]
    SENIOR_HIGH_START_GRADE: int = 11

    # A student with no in-scope requirements counts as fully cleared
    REPORT_VACUOUS_CLEARANCE: bool = True

    PASSWORD_SCHEMES: List[str] = ["pbkdf2_sha256"]

    class Config:
        env_file = ".env"


# Created once
settings = Settings()
