from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import String, asc, cast, desc, or_, select
from .models import Lesson
from .schemas import LessonQuery, SortDirection

class LessonRepository:

    @staticmethod
    async def get_lessons(db: AsyncSession, query: LessonQuery):
        stmt = select(Lesson)
        if query.q:
            pattern = f"%{query.q}%"
            stmt = stmt.where(or_(Lesson.subject.ilike(pattern), Lesson.location.ilike(pattern)))
        if query.min_spaces is not None:
            stmt = stmt.where(Lesson.spaces >= query.min_spaces)
        if query.date is not None:
            stmt = stmt.where(Lesson.date == query.date)
        if query.sort is not None:
            column = getattr(Lesson, query.sort.value)
            direction = desc if query.order == SortDirection.desc else asc
            stmt = stmt.order_by(direction(column), Lesson.id)
        else:
            stmt = stmt.order_by(Lesson.id)
        result = await db.execute(stmt)
        return result.scalars().all()

    @staticmethod
    async def search_lessons(db: AsyncSession, text: str):
        pattern = f"%{text}%"
        stmt = (
            select(Lesson)
            .where(
                or_(
                    Lesson.subject.ilike(pattern),
                    Lesson.location.ilike(pattern),
                    cast(Lesson.price, String).like(pattern),
                    cast(Lesson.spaces, String).like(pattern),
                )
            )
            .order_by(Lesson.id)
        )
        result = await db.execute(stmt)
        return result.scalars().all()

    @staticmethod
    async def get_lesson_by_id(db: AsyncSession, lesson_id: int):
        result = await db.execute(select(Lesson).where(Lesson.id == lesson_id))
        return result.scalars().first()

    @staticmethod
    async def get_lessons_by_ids(db: AsyncSession, lesson_ids):
        result = await db.execute(select(Lesson).where(Lesson.id.in_(set(lesson_ids))))
        return {lesson.id: lesson for lesson in result.scalars().all()}

    @staticmethod
    async def update_lesson(db: AsyncSession, lesson: Lesson):
        db.add(lesson)
        await db.commit()
        await db.refresh(lesson)
        return lesson
