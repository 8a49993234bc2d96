from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession
from services.orchestrator.coordinator import ReservationCoordinator
from services.orchestrator.dependencies import get_coordinator
from shared.config.database import get_db
from shared.config.settings import ORDER_RATE_LIMIT
from shared.security import limiter
from .models import OrderStatus
from .schemas import (
    OrderCancelledResponse,
    OrderCreate,
    OrderCreatedResponse,
    OrderResponse,
    OrderSortKey,
    SortDirection,
)
from .service import OrderService

router = APIRouter()
public_router = APIRouter()  # For any public endpoints (e.g. health check)

@public_router.get("/health")
async def health_check():
    return {"service": "order", "status": "running"}

@router.post("/", response_model=OrderCreatedResponse, status_code=201)
@limiter.limit(ORDER_RATE_LIMIT)
async def create_order(
    request: Request,                          # REQUIRED: slowapi needs this to check IP/Headers
    payload: OrderCreate,
    coordinator: ReservationCoordinator = Depends(get_coordinator)
):
    order = await coordinator.create_order(payload)
    return OrderCreatedResponse(order_id=order.id, total_price=order.total_price, status=order.status)

@router.get("/", response_model=list[OrderResponse])
async def list_orders(
    sort: OrderSortKey = Query(default=OrderSortKey.created_at),
    order: SortDirection = Query(default=SortDirection.asc),
    status: Optional[OrderStatus] = Query(default=None),
    db: AsyncSession = Depends(get_db)
):
    return await OrderService.list_orders(db, sort, order, status)

@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, db: AsyncSession = Depends(get_db)):
    return await OrderService.get_order(db, order_id)

@router.delete("/{order_id}", response_model=OrderCancelledResponse)
async def cancel_order(
    order_id: str,
    coordinator: ReservationCoordinator = Depends(get_coordinator)
):
    order = await coordinator.cancel_order(order_id)
    return OrderCancelledResponse(order_id=order.id, status=order.status)
