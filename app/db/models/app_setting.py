# app/db/models/app_setting.py
from sqlalchemy import Column, String

from app.db.base import Base


class AppSetting(Base):
    __tablename__ = "app_settings"

    key = Column(String, primary_key=True)  # "active_school_year"
    value = Column(String, nullable=False)
