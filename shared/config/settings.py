import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


SERVICE_NAME = os.getenv("SERVICE_NAME", "lesson_booking")

DB_USER = os.getenv("POSTGRES_USER", "postgres")
DB_PASSWORD = os.getenv("POSTGRES_PASSWORD", "postgres")
DB_HOST = os.getenv("POSTGRES_HOST", "localhost") # In Docker, this will be 'postgres'
DB_PORT = os.getenv("POSTGRES_PORT", "5432")
DB_NAME = os.getenv("POSTGRES_DB", "extra_class_lesson_db")

# A full URL wins over the individual parts (tests point this at SQLite)
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql+asyncpg://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)
DB_ECHO = _env_flag("DB_ECHO", False)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "json") # json | console

TRACING_ENABLED = _env_flag("TRACING_ENABLED", True)
OTLP_ENDPOINT = os.getenv("OTLP_ENDPOINT", "http://localhost:4317")

RATE_LIMIT_ENABLED = _env_flag("RATE_LIMIT_ENABLED", True)
ORDER_RATE_LIMIT = os.getenv("ORDER_RATE_LIMIT", "30/minute")

# Direct writes to Lesson.spaces bypass the reservation workflow
LESSON_SPACES_EDITABLE = _env_flag("LESSON_SPACES_EDITABLE", True)

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
IMAGES_DIR = os.getenv("IMAGES_DIR", "images")
