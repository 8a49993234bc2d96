from prometheus_client import Counter, Histogram

# Business Metrics
lessons_order_total = Counter(
    "lessons_order_total",
    "Order placement attempts",
    ["status"] # Labels: 'created', 'rejected', 'failed'
)

lessons_order_duration_seconds = Histogram(
    "lessons_order_duration_seconds",
    "Order placement duration in seconds"
)

lessons_cancellation_total = Counter(
    "lessons_cancellation_total",
    "Order cancellation attempts",
    ["status"] # Labels: 'cancelled', 'not_found', 'already_cancelled', 'failed'
)

lessons_saga_compensation_total = Counter(
    "lessons_saga_compensation_total",
    "Total saga compensations triggered",
    ["step_name"] # Labels: 'reserve_lesson_units'
)

lessons_seats_reserved_total = Counter(
    "lessons_seats_reserved_total",
    "Seats taken by successful conditional decrements"
)

lessons_seats_released_total = Counter(
    "lessons_seats_released_total",
    "Seats given back by compensations and cancellations"
)

lessons_direct_capacity_write_total = Counter(
    "lessons_direct_capacity_write_total",
    "Writes to Lesson.spaces through the field update path"
)
