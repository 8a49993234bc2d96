from datetime import date as dt_date
from typing import Optional
from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession
from shared.config.database import MAX_DB_INT, get_db
from .schemas import LessonQuery, LessonResponse, LessonSortKey, LessonUpdate, SortDirection
from .service import LessonService

router = APIRouter()
public_router = APIRouter()  # For any public endpoints (e.g. health check)

@public_router.get("/health")
async def health_check():
    return {"service": "lesson", "status": "running"}


@router.get("/", response_model=list[LessonResponse])
async def list_lessons(
    q: Optional[str] = Query(default=None, description="Substring of subject or location"),
    min_spaces: Optional[int] = Query(default=None, ge=0),
    date: Optional[dt_date] = Query(default=None),
    sort: Optional[LessonSortKey] = Query(default=None),
    order: SortDirection = Query(default=SortDirection.asc),
    db: AsyncSession = Depends(get_db)
):
    query = LessonQuery(q=q, min_spaces=min_spaces, date=date, sort=sort, order=order)
    return await LessonService.list_lessons(db, query)

@router.get("/search", response_model=list[LessonResponse])
async def search_lessons(
    query: Optional[str] = Query(default=None),
    db: AsyncSession = Depends(get_db)
):
    return await LessonService.search_lessons(db, query)

@router.get("/{lesson_id}", response_model=LessonResponse)
async def get_lesson(lesson_id: int = Path(ge=1, le=MAX_DB_INT), db: AsyncSession = Depends(get_db)):
    return await LessonService.get_lesson(db, lesson_id)

@router.put("/{lesson_id}", response_model=LessonResponse)
async def update_lesson(
    payload: LessonUpdate,
    lesson_id: int = Path(ge=1, le=MAX_DB_INT),
    db: AsyncSession = Depends(get_db)
):
    return await LessonService.update_lesson(db, lesson_id, payload)
