import os
import tempfile

# Configure before the application modules read the environment
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{tempfile.gettempdir()}/lesson_booking_unused.db"
os.environ["TRACING_ENABLED"] = "false"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402

from main import app  # noqa: E402
from services.lesson_service.main import lesson_app  # noqa: E402
from services.lesson_service.models import Lesson  # noqa: E402
from services.order_service.main import order_app  # noqa: E402
from services.orchestrator.coordinator import ReservationCoordinator  # noqa: E402
from shared.config.database import Base, get_session_factory  # noqa: E402


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """A fresh file-backed SQLite database per test."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'booking.db'}",
        connect_args={"timeout": 30},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
def coordinator(session_factory) -> ReservationCoordinator:
    return ReservationCoordinator(session_factory)


@pytest.fixture
def add_lesson(session_factory):
    async def _add(subject="Math", spaces=5, price=15.0, location="Room 101, London", **extra) -> int:
        async with session_factory() as db:
            lesson = Lesson(subject=subject, location=location, price=price, spaces=spaces, **extra)
            db.add(lesson)
            await db.commit()
            return lesson.id

    return _add


@pytest.fixture
def remaining(session_factory):
    async def _remaining(lesson_id: int):
        async with session_factory() as db:
            lesson = await db.get(Lesson, lesson_id)
            return lesson.spaces if lesson else None

    return _remaining


@pytest_asyncio.fixture
async def client(session_factory):
    sub_apps = (lesson_app, order_app)
    for sub_app in sub_apps:
        sub_app.dependency_overrides[get_session_factory] = lambda: session_factory
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http
    for sub_app in sub_apps:
        sub_app.dependency_overrides.clear()
