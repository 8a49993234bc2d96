"""Error taxonomy shared by the lesson and order services.

Every error carries a stable ``code`` so callers can tell the kinds apart
without parsing messages.
"""


class DomainError(Exception):
    code = "DomainError"

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.code, "detail": self.message}


class InvalidInputError(DomainError):
    """Malformed or missing request fields. Raised before any store access."""

    code = "InvalidInput"

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message, 400)
        self.errors = errors or []

    def to_dict(self) -> dict:
        body = super().to_dict()
        if self.errors:
            body["errors"] = self.errors
        return body


class NotFoundError(DomainError):
    code = "NotFound"

    def __init__(self, message: str, lesson_id: int | None = None):
        super().__init__(message, 404)
        self.lesson_id = lesson_id

    def to_dict(self) -> dict:
        body = super().to_dict()
        if self.lesson_id is not None:
            body["lesson_id"] = self.lesson_id
        return body


class CapacityExceededError(DomainError):
    code = "CapacityExceeded"

    def __init__(self, lesson_id: int, requested: int):
        super().__init__(f"Not enough spaces for lesson {lesson_id} (requested {requested})", 409)
        self.lesson_id = lesson_id
        self.requested = requested

    def to_dict(self) -> dict:
        body = super().to_dict()
        body["lesson_id"] = self.lesson_id
        return body


class AlreadyCancelledError(DomainError):
    code = "AlreadyCancelled"

    def __init__(self, order_id: str):
        super().__init__(f"Order {order_id} is already cancelled", 409)
        self.order_id = order_id


class PersistFailureError(DomainError):
    """The store could not durably commit the unit of work."""

    code = "PersistFailure"

    def __init__(self, message: str):
        super().__init__(message, 503)
