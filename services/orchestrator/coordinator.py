"""
Order placement and cancellation.

Placement is a saga: one conditional seat decrement per requested item,
each committed on its own, then the order row. Any failure releases the
seats already taken, newest first, before the error reaches the caller.

Cancellation is a single transaction: the ACTIVE -> CANCELLED flip and every
seat release commit together or not at all. The flip is conditional, so a
second cancel of the same order can never release seats twice.
"""
import time
from datetime import datetime, timezone

import structlog
from pydantic import ValidationError
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from services.lesson_service.capacity_store import CapacityStore
from services.order_service.models import Order, OrderStatus
from services.order_service.repository import OrderRepository
from services.order_service.schemas import OrderCreate
from shared.exception import (
    AlreadyCancelledError,
    DomainError,
    InvalidInputError,
    NotFoundError,
    PersistFailureError,
)
from shared.observability import (
    lessons_cancellation_total,
    lessons_order_duration_seconds,
    lessons_order_total,
    lessons_seats_released_total,
)
from .booking_saga import build_booking_saga

logger = structlog.get_logger(__name__)


class ReservationCoordinator:
    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    @staticmethod
    def validate(request) -> OrderCreate:
        if isinstance(request, OrderCreate):
            return request
        try:
            return OrderCreate.model_validate(request)
        except ValidationError as exc:
            raise InvalidInputError("Missing or invalid fields", errors=jsonable_encoder(exc.errors())) from exc

    async def create_order(self, request) -> Order:
        data = self.validate(request)
        ctx = {
            "session_factory": self.session_factory,
            "request": data,
            "reserved": [],
            "order": None,
        }
        started = time.perf_counter()
        try:
            await build_booking_saga(data).execute(ctx)
        except PersistFailureError:
            lessons_order_total.labels(status="failed").inc()
            logger.error("order_failed", customer=data.name, unwound=len(ctx["reserved"]))
            raise
        except DomainError as exc:
            lessons_order_total.labels(status="rejected").inc()
            logger.info("order_rejected", customer=data.name, reason=exc.code, detail=exc.message, unwound=len(ctx["reserved"]))
            raise
        finally:
            lessons_order_duration_seconds.observe(time.perf_counter() - started)

        order = ctx["order"]
        lessons_order_total.labels(status="created").inc()
        logger.info(
            "order_created",
            order_id=order.id,
            items=[(i.lesson_id, i.quantity) for i in order.items],
            total_price=order.total_price,
        )
        return order

    async def cancel_order(self, order_id: str) -> Order:
        async with self.session_factory() as db:
            try:
                order = await OrderRepository.get_order(db, order_id)
                if order is None:
                    lessons_cancellation_total.labels(status="not_found").inc()
                    raise NotFoundError(f"Order {order_id} not found")
                if order.status == OrderStatus.CANCELLED.value:
                    lessons_cancellation_total.labels(status="already_cancelled").inc()
                    raise AlreadyCancelledError(order_id)

                cancelled_at = datetime.now(timezone.utc)
                if not await OrderRepository.mark_cancelled(db, order_id, cancelled_at):
                    # Lost the race to a concurrent cancel
                    await db.rollback()
                    lessons_cancellation_total.labels(status="already_cancelled").inc()
                    raise AlreadyCancelledError(order_id)

                store = CapacityStore(db)
                released = 0
                for item in order.items:
                    result = await store.release(item.lesson_id, item.quantity)
                    if result.ok:
                        released += item.quantity
                    else:
                        logger.warning("release_skipped", order_id=order_id, lesson_id=item.lesson_id, reason=result.outcome.value)

                await db.commit()
            except SQLAlchemyError as exc:
                await db.rollback()
                lessons_cancellation_total.labels(status="failed").inc()
                raise PersistFailureError(f"Order {order_id} could not be cancelled") from exc

            await db.refresh(order, attribute_names=["status", "cancelled_at"])

        lessons_seats_released_total.inc(released)
        lessons_cancellation_total.labels(status="cancelled").inc()
        logger.info("order_cancelled", order_id=order_id, seats_released=released)
        return order
