from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from fastapi import Request
from fastapi.responses import JSONResponse

from shared.config.settings import RATE_LIMIT_ENABLED


def client_address(request: Request) -> str:
    """
    Key function for SlowAPI.
    There are no user accounts, so orders are throttled per client address
    (honours X-Forwarded-For when Uvicorn runs with --proxy-headers).
    """
    return f"ip:{get_remote_address(request)}"


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return JSONResponse(
        status_code=429,
        content={"error": "RateLimited", "detail": f"Rate limit exceeded: {exc.detail}"},
    )

limiter = Limiter(key_func=client_address, enabled=RATE_LIMIT_ENABLED)
