import enum
from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from shared.config.database import Base

class OrderStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    CANCELLED = "CANCELLED"

class Order(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, index=True) # UUID string
    name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    total_price = Column(Float, nullable=True) # priced from the lessons at creation
    status = Column(String, nullable=False, default=OrderStatus.ACTIVE.value, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    cancelled_at = Column(DateTime(timezone=True), nullable=True)

    items = relationship(
        "OrderItem",
        back_populates="order",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="OrderItem.position",
    )

class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    # No FK: lessons are administered outside this service and may disappear
    lesson_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Float, nullable=True)
    subject = Column(String, nullable=True)
    position = Column(Integer, nullable=False, default=0)

    order = relationship("Order", back_populates="items")
