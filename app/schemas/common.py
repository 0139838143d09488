# app/schemas/common.py
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


@dataclass(frozen=True)
class SectionChange:
    """What an update does to a student's section: keep, move, or unassign."""
    action: str  # "unchanged" | "set" | "clear"
    section_id: Optional[int] = None

    @classmethod
    def unchanged(cls) -> "SectionChange":
        return cls("unchanged")

    @classmethod
    def set_to(cls, section_id: int) -> "SectionChange":
        return cls("set", section_id)

    @classmethod
    def clear(cls) -> "SectionChange":
        return cls("clear")


class MessageOut(BaseModel):
    message: str
