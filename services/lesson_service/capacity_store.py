"""
Remaining-seat counters for lessons.

Every change to ``Lesson.spaces`` made on behalf of an order goes through
this module. A reservation is one conditional UPDATE, so two concurrent
callers can never both take the last seats: the database applies the
``spaces >= units`` guard and the decrement as a single statement.

The store is bound to a caller-owned ``AsyncSession`` and never commits.
Whoever opened the session decides whether the change is kept.
"""
import enum
from dataclasses import dataclass

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Lesson


class CapacityOutcome(str, enum.Enum):
    RESERVED = "reserved"
    RELEASED = "released"
    INSUFFICIENT_CAPACITY = "insufficient_capacity"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class CapacityResult:
    lesson_id: int
    units: int
    outcome: CapacityOutcome

    @property
    def ok(self) -> bool:
        return self.outcome in (CapacityOutcome.RESERVED, CapacityOutcome.RELEASED)


def _check_units(units: int) -> None:
    if isinstance(units, bool) or not isinstance(units, int) or units <= 0:
        raise ValueError(f"units must be a positive integer, got {units!r}")


class CapacityStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def try_reserve(self, lesson_id: int, units: int) -> CapacityResult:
        """Take ``units`` seats only if at least that many remain."""
        _check_units(units)
        stmt = (
            update(Lesson)
            .where(Lesson.id == lesson_id, Lesson.spaces >= units)
            .values(spaces=Lesson.spaces - units)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount == 1:
            return CapacityResult(lesson_id, units, CapacityOutcome.RESERVED)

        # Nothing matched: either the lesson is gone or it is short of seats
        exists = await self.db.execute(select(Lesson.id).where(Lesson.id == lesson_id))
        if exists.first() is None:
            return CapacityResult(lesson_id, units, CapacityOutcome.NOT_FOUND)
        return CapacityResult(lesson_id, units, CapacityOutcome.INSUFFICIENT_CAPACITY)

    async def release(self, lesson_id: int, units: int) -> CapacityResult:
        """Give ``units`` seats back. No upper bound is applied."""
        _check_units(units)
        stmt = (
            update(Lesson)
            .where(Lesson.id == lesson_id)
            .values(spaces=Lesson.spaces + units)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount == 1:
            return CapacityResult(lesson_id, units, CapacityOutcome.RELEASED)
        return CapacityResult(lesson_id, units, CapacityOutcome.NOT_FOUND)

