from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from fastapi import Depends

from .settings import DATABASE_URL, DB_ECHO

# Process-lifetime handles: created at import, disposed on application shutdown
engine = create_async_engine(DATABASE_URL, echo=DB_ECHO)

AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)

Base = declarative_base()

# Largest value a 32-bit INTEGER column holds
MAX_DB_INT = 2**31 - 1


def get_session_factory() -> async_sessionmaker:
    """Dependency returning the session factory. Overridden in tests."""
    return AsyncSessionLocal


async def get_db(session_factory: async_sessionmaker = Depends(get_session_factory)):
    async with session_factory() as session:
        yield session


async def dispose_engine():
    await engine.dispose()
