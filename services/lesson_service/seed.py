"""
Replace the lessons table with the starter catalogue.

    python -m services.lesson_service.seed
"""
import asyncio

import structlog
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import async_sessionmaker

from shared.config.database import AsyncSessionLocal, Base, dispose_engine, engine
from shared.observability import configure_logging
from .models import Lesson

logger = structlog.get_logger(__name__)

LESSONS = [
    {"subject": "Math", "location": "Room 101, Main Building, London", "price": 15, "spaces": 5, "image": "/images/math.jpg"},
    {"subject": "English", "location": "Library Annex, Kensington", "price": 12.5, "spaces": 5, "image": "/images/english.jpg"},
    {"subject": "Physics", "location": "Lab A, Westminster", "price": 18, "spaces": 5, "image": "/images/physics.jpg"},
    {"subject": "Chemistry", "location": "Lab B, Westminster", "price": 18, "spaces": 5, "image": "/images/chemistry.jpg"},
    {"subject": "History", "location": "Room 205, Culture Street", "price": 10, "spaces": 5, "image": "/images/history.jpg"},
    {"subject": "Geography", "location": "Room 206, Culture Street", "price": 10, "spaces": 5, "image": "/images/geography.jpg"},
    {"subject": "Art", "location": "Studio 3, Shoreditch", "price": 22, "spaces": 5, "image": "/images/art.jpg"},
    {"subject": "Music", "location": "Studio 4, Shoreditch", "price": 22, "spaces": 5, "image": "/images/music.jpg"},
    {"subject": "PE", "location": "Sports Complex, Greenwich", "price": 8, "spaces": 5, "image": "/images/pe.jpg"},
    {"subject": "Programming", "location": "Online via Zoom", "price": 25, "spaces": 5, "image": "/images/programming.jpg"},
]


async def seed_lessons(session_factory: async_sessionmaker, lessons=LESSONS) -> int:
    async with session_factory() as db:
        await db.execute(delete(Lesson))
        db.add_all([Lesson(**row) for row in lessons])
        await db.commit()
    logger.info("lessons_seeded", count=len(lessons))
    return len(lessons)


async def main():
    configure_logging()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        await seed_lessons(AsyncSessionLocal)
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
