import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config import settings
from shared.exception import InvalidInputError, NotFoundError
from shared.observability import lessons_direct_capacity_write_total
from .repository import LessonRepository
from .schemas import LessonQuery, LessonUpdate

logger = structlog.get_logger(__name__)

class LessonService:

    @staticmethod
    async def list_lessons(db: AsyncSession, query: LessonQuery):
        return await LessonRepository.get_lessons(db, query)

    @staticmethod
    async def search_lessons(db: AsyncSession, text: str | None):
        text = (text or "").strip()
        if not text:
            return await LessonRepository.get_lessons(db, LessonQuery())
        return await LessonRepository.search_lessons(db, text)

    @staticmethod
    async def get_lesson(db: AsyncSession, lesson_id: int):
        lesson = await LessonRepository.get_lesson_by_id(db, lesson_id)
        if not lesson:
            raise NotFoundError(f"Lesson {lesson_id} not found", lesson_id=lesson_id)
        return lesson

    @staticmethod
    async def update_lesson(db: AsyncSession, lesson_id: int, data: LessonUpdate):
        changes = data.model_dump(exclude_unset=True)
        if not changes:
            raise InvalidInputError("No updatable fields supplied")
        for field in ("price", "spaces"):
            if field in changes and changes[field] is None:
                raise InvalidInputError(f"{field} cannot be null")

        # Known gap: this is an unconditional write to the seat counter that
        # the reservation coordinator knows nothing about
        if "spaces" in changes and not settings.LESSON_SPACES_EDITABLE:
            raise InvalidInputError("spaces is managed by order reservations")

        lesson = await LessonService.get_lesson(db, lesson_id)
        previous_spaces = lesson.spaces
        for field, value in changes.items():
            setattr(lesson, field, value)
        lesson = await LessonRepository.update_lesson(db, lesson)

        if "spaces" in changes:
            lessons_direct_capacity_write_total.inc()
            logger.warning(
                "direct_capacity_write",
                lesson_id=lesson_id,
                previous_spaces=previous_spaces,
                spaces=lesson.spaces,
            )
        logger.info("lesson_updated", lesson_id=lesson_id, fields=sorted(changes))
        return lesson
