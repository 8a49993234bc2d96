import uuid
from datetime import datetime, timezone

import structlog
from sqlalchemy.exc import SQLAlchemyError

from services.lesson_service.capacity_store import CapacityOutcome, CapacityStore
from services.lesson_service.repository import LessonRepository
from services.order_service.models import Order, OrderItem, OrderStatus
from services.order_service.repository import OrderRepository
from shared.exception import CapacityExceededError, NotFoundError, PersistFailureError
from shared.observability import lessons_seats_released_total, lessons_seats_reserved_total
from .saga import SagaOrchestrator

logger = structlog.get_logger(__name__)

# ctx keys: "session_factory", "request" (OrderCreate), "reserved" (list), "order"

# --- ACTIONS ---

def reserve_lesson_units(lesson_id: int, units: int):
    async def action(ctx: dict):
        async with ctx["session_factory"]() as db:
            try:
                result = await CapacityStore(db).try_reserve(lesson_id, units)
                if not result.ok:
                    await db.rollback()
                else:
                    await db.commit()
            except SQLAlchemyError as exc:
                await db.rollback()
                raise PersistFailureError(f"Could not reserve seats for lesson {lesson_id}") from exc

        if result.outcome == CapacityOutcome.NOT_FOUND:
            raise NotFoundError(f"Lesson {lesson_id} not found", lesson_id=lesson_id)
        if result.outcome == CapacityOutcome.INSUFFICIENT_CAPACITY:
            raise CapacityExceededError(lesson_id, units)

        lessons_seats_reserved_total.inc(units)
        ctx["reserved"].append(result)
    return action

async def persist_order(ctx: dict):
    data = ctx["request"]
    try:
        async with ctx["session_factory"]() as db:
            lessons = await LessonRepository.get_lessons_by_ids(db, [i.lesson_id for i in data.items])
            items = []
            total = 0.0
            for position, item in enumerate(data.items):
                lesson = lessons.get(item.lesson_id)
                unit_price = lesson.price if lesson else None
                if unit_price is None:
                    total = None
                elif total is not None:
                    total += unit_price * item.quantity
                items.append(OrderItem(
                    lesson_id=item.lesson_id,
                    quantity=item.quantity,
                    unit_price=unit_price,
                    subject=lesson.subject if lesson else None,
                    position=position,
                ))
            order = Order(
                id=str(uuid.uuid4()),
                name=data.name,
                phone=data.phone,
                total_price=round(total, 2) if total is not None else None,
                status=OrderStatus.ACTIVE.value,
                created_at=datetime.now(timezone.utc),
                items=items,
            )
            ctx["order"] = await OrderRepository.create_order(db, order)
    except SQLAlchemyError as exc:
        raise PersistFailureError("Order could not be saved") from exc


# --- COMPENSATIONS (Rollbacks) ---

def release_lesson_units(lesson_id: int, units: int):
    async def compensation(ctx: dict):
        async with ctx["session_factory"]() as db:
            result = await CapacityStore(db).release(lesson_id, units)
            await db.commit()
        if result.ok:
            lessons_seats_released_total.inc(units)
            logger.info("reservation_compensated", lesson_id=lesson_id, units=units)
        else:
            logger.warning("release_skipped", lesson_id=lesson_id, units=units, reason=result.outcome.value)
    return compensation


# --- BUILDER FACTORY ---

def build_booking_saga(data) -> SagaOrchestrator:
    saga = SagaOrchestrator()
    for item in data.items:
        saga.add_step(
            "reserve_lesson_units",
            reserve_lesson_units(item.lesson_id, item.quantity),
            release_lesson_units(item.lesson_id, item.quantity),
        )
    saga.add_step("persist_order", persist_order, None) # Last step, nothing after it to undo
    return saga
