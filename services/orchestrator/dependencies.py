from fastapi import Depends
from sqlalchemy.ext.asyncio import async_sessionmaker

from shared.config.database import get_session_factory
from .coordinator import ReservationCoordinator


def get_coordinator(
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> ReservationCoordinator:
    return ReservationCoordinator(session_factory)
