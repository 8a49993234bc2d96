import pytest

from services.lesson_service.capacity_store import CapacityOutcome, CapacityStore


@pytest.mark.integration
class TestCapacityStore:

    @pytest.mark.asyncio
    async def test_try_reserve__decrements_when_enough_seats(self, session_factory, add_lesson, remaining):
        lesson_id = await add_lesson(spaces=5)

        async with session_factory() as db:
            result = await CapacityStore(db).try_reserve(lesson_id, 2)
            await db.commit()

        assert result.outcome == CapacityOutcome.RESERVED
        assert result.ok
        assert await remaining(lesson_id) == 3

    @pytest.mark.asyncio
    async def test_try_reserve__exact_remaining_leaves_zero(self, session_factory, add_lesson, remaining):
        lesson_id = await add_lesson(spaces=1)

        async with session_factory() as db:
            store = CapacityStore(db)
            first = await store.try_reserve(lesson_id, 1)
            second = await store.try_reserve(lesson_id, 1)
            await db.commit()

        assert first.outcome == CapacityOutcome.RESERVED
        assert second.outcome == CapacityOutcome.INSUFFICIENT_CAPACITY
        assert await remaining(lesson_id) == 0

    @pytest.mark.asyncio
    async def test_try_reserve__multi_unit_request_needs_all_units(self, session_factory, add_lesson, remaining):
        lesson_id = await add_lesson(spaces=2)

        async with session_factory() as db:
            result = await CapacityStore(db).try_reserve(lesson_id, 3)
            await db.commit()

        assert result.outcome == CapacityOutcome.INSUFFICIENT_CAPACITY
        assert not result.ok
        assert await remaining(lesson_id) == 2

    @pytest.mark.asyncio
    async def test_try_reserve__unknown_lesson(self, session_factory):
        async with session_factory() as db:
            result = await CapacityStore(db).try_reserve(999, 1)

        assert result.outcome == CapacityOutcome.NOT_FOUND

    @pytest.mark.asyncio
    async def test_release__adds_units_without_ceiling(self, session_factory, add_lesson, remaining):
        lesson_id = await add_lesson(spaces=5)

        async with session_factory() as db:
            result = await CapacityStore(db).release(lesson_id, 3)
            await db.commit()

        assert result.outcome == CapacityOutcome.RELEASED
        assert await remaining(lesson_id) == 8

    @pytest.mark.asyncio
    async def test_release__unknown_lesson(self, session_factory):
        async with session_factory() as db:
            result = await CapacityStore(db).release(999, 1)

        assert result.outcome == CapacityOutcome.NOT_FOUND
        assert not result.ok

    @pytest.mark.asyncio
    async def test_uncommitted_reservation_is_discarded(self, session_factory, add_lesson, remaining):
        lesson_id = await add_lesson(spaces=4)

        async with session_factory() as db:
            await CapacityStore(db).try_reserve(lesson_id, 4)
            await db.rollback()

        assert await remaining(lesson_id) == 4

    @pytest.mark.asyncio
    @pytest.mark.parametrize("units", [0, -1, True, 1.5])
    async def test_rejects_non_positive_units(self, session_factory, add_lesson, units):
        lesson_id = await add_lesson(spaces=4)

        async with session_factory() as db:
            store = CapacityStore(db)
            with pytest.raises(ValueError):
                await store.try_reserve(lesson_id, units)
            with pytest.raises(ValueError):
                await store.release(lesson_id, units)
