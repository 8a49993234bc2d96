from fastapi import FastAPI
from shared.exception import register_exception_handlers
from .router import router, public_router
from .models import Lesson # Import to register with Base

lesson_app = FastAPI(
    title="Lesson Service",
    version="1.0.0"
)

register_exception_handlers(lesson_app)

lesson_app.include_router(public_router)
lesson_app.include_router(router)
