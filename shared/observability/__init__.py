from .setup import setup_observability, configure_logging
from .metrics import (
    lessons_order_total,
    lessons_order_duration_seconds,
    lessons_cancellation_total,
    lessons_saga_compensation_total,
    lessons_seats_reserved_total,
    lessons_seats_released_total,
    lessons_direct_capacity_write_total,
)
