from .exceptions import (
    DomainError,
    InvalidInputError,
    NotFoundError,
    CapacityExceededError,
    AlreadyCancelledError,
    PersistFailureError,
)
from .exception_handlers import register_exception_handlers

__all__ = [
    "DomainError",
    "InvalidInputError",
    "NotFoundError",
    "CapacityExceededError",
    "AlreadyCancelledError",
    "PersistFailureError",
    "register_exception_handlers",
]
