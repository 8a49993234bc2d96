from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import AliasChoices, BaseModel, Field
from shared.config.database import MAX_DB_INT

class OrderItemCreate(BaseModel):
    lesson_id: int = Field(ge=1, le=MAX_DB_INT, validation_alias=AliasChoices("lesson_id", "lessonId"))
    quantity: int = Field(ge=1, le=MAX_DB_INT, validation_alias=AliasChoices("quantity", "units"))

class OrderCreate(BaseModel):
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    items: List[OrderItemCreate] = Field(min_length=1)

    class Config:
        str_strip_whitespace = True

class OrderItemResponse(BaseModel):
    lesson_id: int
    quantity: int
    unit_price: Optional[float] = None
    subject: Optional[str] = None

    class Config:
        from_attributes = True

class OrderResponse(BaseModel):
    id: str
    name: str
    phone: str
    total_price: Optional[float]
    status: str
    created_at: datetime
    cancelled_at: Optional[datetime] = None
    items: List[OrderItemResponse] = []

    class Config:
        from_attributes = True

class OrderCreatedResponse(BaseModel):
    message: str = "Order created"
    order_id: str
    total_price: Optional[float]
    status: str

class OrderCancelledResponse(BaseModel):
    message: str = "Order cancelled"
    order_id: str
    status: str

class OrderSortKey(str, Enum):
    created_at = "created_at"
    name = "name"
    total_price = "total_price"

class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"
