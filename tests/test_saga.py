from unittest.mock import AsyncMock

import pytest

from services.orchestrator.saga import SagaOrchestrator


@pytest.mark.unit
class TestSagaOrchestrator:

    @pytest.mark.asyncio
    async def test_execute__runs_every_step_in_order(self) -> None:
        calls = []

        def record(name):
            async def _step(ctx):
                calls.append(name)
            return _step

        saga = SagaOrchestrator().add_step("a", record("a")).add_step("b", record("b"))

        assert await saga.execute({}) is True
        assert calls == ["a", "b"]

    @pytest.mark.asyncio
    async def test_execute__compensates_executed_steps_in_reverse(self) -> None:
        undone = []

        def undo(name):
            async def _undo(ctx):
                undone.append(name)
            return _undo

        failing = AsyncMock(side_effect=RuntimeError("boom"))
        never_undone = AsyncMock()
        saga = (
            SagaOrchestrator()
            .add_step("first", AsyncMock(), undo("first"))
            .add_step("second", AsyncMock(), undo("second"))
            .add_step("third", failing, never_undone)
        )

        with pytest.raises(RuntimeError, match="boom"):
            await saga.execute({})

        assert undone == ["second", "first"]
        never_undone.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failing_compensation_does_not_block_others(self) -> None:
        first_undo = AsyncMock()
        second_undo = AsyncMock(side_effect=RuntimeError("compensation broke"))
        saga = (
            SagaOrchestrator()
            .add_step("first", AsyncMock(), first_undo)
            .add_step("second", AsyncMock(), second_undo)
            .add_step("third", AsyncMock(side_effect=ValueError("rejected")))
        )

        with pytest.raises(ValueError, match="rejected"):
            await saga.execute({"k": "v"})

        second_undo.assert_awaited_once_with({"k": "v"})
        first_undo.assert_awaited_once_with({"k": "v"})

    @pytest.mark.asyncio
    async def test_steps_without_compensation_are_skipped_on_rollback(self) -> None:
        undo = AsyncMock()
        saga = (
            SagaOrchestrator()
            .add_step("reserve", AsyncMock(), undo)
            .add_step("read_only", AsyncMock(), None)
            .add_step("persist", AsyncMock(side_effect=LookupError()))
        )

        with pytest.raises(LookupError):
            await saga.execute({})

        undo.assert_awaited_once()
