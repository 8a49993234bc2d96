from .rate_limiter import limiter, client_address, rate_limit_exceeded_handler

__all__ = [
    "limiter",
    "client_address",
    "rate_limit_exceeded_handler",
]
