from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import asc, desc, select, update
from .models import Order, OrderStatus
from .schemas import OrderSortKey, SortDirection

class OrderRepository:
    @staticmethod
    async def create_order(db: AsyncSession, order: Order):
        db.add(order)
        await db.commit()
        # Every column is assigned up front, nothing to reload
        return order

    @staticmethod
    async def get_order(db: AsyncSession, order_id: str):
        result = await db.execute(select(Order).where(Order.id == order_id))
        return result.scalars().first()

    @staticmethod
    async def list_orders(
        db: AsyncSession,
        sort: OrderSortKey = OrderSortKey.created_at,
        direction: SortDirection = SortDirection.asc,
        status: OrderStatus | None = None,
    ):
        order_by = desc if direction == SortDirection.desc else asc
        stmt = select(Order).order_by(order_by(getattr(Order, sort.value)), Order.id)
        if status is not None:
            stmt = stmt.where(Order.status == status.value)
        result = await db.execute(stmt)
        return result.scalars().all()

    @staticmethod
    async def mark_cancelled(db: AsyncSession, order_id: str, cancelled_at) -> bool:
        """
        Flip ACTIVE -> CANCELLED. Only one caller can win the transition.
        Does not commit: it joins the caller's unit of work.
        """
        stmt = (
            update(Order)
            .where(Order.id == order_id, Order.status == OrderStatus.ACTIVE.value)
            .values(status=OrderStatus.CANCELLED.value, cancelled_at=cancelled_at)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount == 1
