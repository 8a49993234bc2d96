import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from shared.config.database import engine, Base, dispose_engine
from shared.config.settings import CORS_ORIGINS, IMAGES_DIR, SERVICE_NAME
from shared.observability import setup_observability

# IMPORTANT: import models so they register with Base
from services.lesson_service import models as lesson_models
from services.order_service import models as order_models

from services.lesson_service.main import lesson_app
from services.order_service.main import order_app

app = FastAPI(title="Lesson Booking")

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(app, SERVICE_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
async def startup_event():
    async with engine.begin() as conn:
        # Create all tables
        await conn.run_sync(Base.metadata.create_all)

@app.on_event("shutdown")
async def shutdown_event():
    await dispose_engine()

@app.get("/health")
async def health_check():
    return {"service": SERVICE_NAME, "status": "running"}

app.mount("/lessons", lesson_app)
app.mount("/orders", order_app)

# Lesson images, when a local directory is provided
if os.path.isdir(IMAGES_DIR):
    app.mount("/images", StaticFiles(directory=IMAGES_DIR), name="images")
