import pytest
from sqlalchemy import func, select

from services.lesson_service.models import Lesson
from services.lesson_service.seed import LESSONS, seed_lessons


@pytest.mark.integration
@pytest.mark.asyncio
async def test_seed_replaces_existing_lessons(session_factory, add_lesson):
    await add_lesson(subject="Stale")

    count = await seed_lessons(session_factory)

    async with session_factory() as db:
        total = await db.scalar(select(func.count()).select_from(Lesson))
        subjects = (await db.execute(select(Lesson.subject).order_by(Lesson.id))).scalars().all()
    assert count == total == len(LESSONS)
    assert "Stale" not in subjects
    assert subjects[0] == "Math"
