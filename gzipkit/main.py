# gzipkit/main.py
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gzipkit.api import routers
from gzipkit.core.config import get_settings
from gzipkit.core.logging import configure_logging

# === إعدادات وتسجيل ===
settings = get_settings()
logger = configure_logging()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
)

# === CORS ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allow_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# === Routers ===
for router in routers:
    app.include_router(router)


@app.get("/health")
async def health_check() -> dict:
    logger.debug("Health check invoked")
    return {"status": "ok", "message": f"{settings.app_name} is running"}
