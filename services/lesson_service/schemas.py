from datetime import date as dt_date
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field
from shared.config.database import MAX_DB_INT

class LessonSortKey(str, Enum):
    subject = "subject"
    location = "location"
    price = "price"
    spaces = "spaces"
    date = "date"

class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"

class LessonQuery(BaseModel):
    q: Optional[str] = None
    min_spaces: Optional[int] = Field(default=None, ge=0)
    date: Optional[dt_date] = None
    sort: Optional[LessonSortKey] = None
    order: SortDirection = SortDirection.asc

class LessonUpdate(BaseModel):
    """Whitelisted editable fields. Anything else is rejected."""
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    date: Optional[dt_date] = None
    # Bypasses the reservation workflow, see LessonService.update_lesson
    spaces: Optional[int] = Field(default=None, ge=0, le=MAX_DB_INT)

    class Config:
        extra = "forbid"

class LessonResponse(BaseModel):
    id: int
    subject: str
    location: str
    price: float
    spaces: int
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[dt_date] = None
    image: Optional[str] = None

    class Config:
        from_attributes = True
