from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from shared.exception import register_exception_handlers
from shared.security import limiter, rate_limit_exceeded_handler
from .router import router, public_router
from .models import Order, OrderItem # Import to register with Base

order_app = FastAPI(title="Order Service", version="1.0.0")

# --- ERROR + RATE LIMIT SETUP ---
register_exception_handlers(order_app)
order_app.state.limiter = limiter
order_app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

order_app.include_router(public_router)
order_app.include_router(router)
