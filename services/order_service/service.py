from sqlalchemy.ext.asyncio import AsyncSession
from shared.exception import NotFoundError
from .models import OrderStatus
from .repository import OrderRepository
from .schemas import OrderSortKey, SortDirection

class OrderService:
    """Read side of the ledger. Writes go through the ReservationCoordinator."""

    @staticmethod
    async def list_orders(
        db: AsyncSession,
        sort: OrderSortKey = OrderSortKey.created_at,
        direction: SortDirection = SortDirection.asc,
        status: OrderStatus | None = None,
    ):
        return await OrderRepository.list_orders(db, sort, direction, status)

    @staticmethod
    async def get_order(db: AsyncSession, order_id: str):
        order = await OrderRepository.get_order(db, order_id)
        if not order:
            raise NotFoundError(f"Order {order_id} not found")
        return order
