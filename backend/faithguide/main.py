# faithguide/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from faithguide.config import settings
from faithguide.core.db import init_db, close_db

from faithguide.api.v1.routers import auth, progress, journal, chat

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS (with Cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def on_startup():
    # Missing DATABASE_URL (or a production process without JWT_SECRET) aborts startup
    settings.validate_for_startup()
    await init_db()
    logger.info("[startup] %s ready (env=%s)", settings.APP_NAME, settings.env)


@app.on_event("shutdown")
async def on_shutdown():
    await close_db()


# REST
app.include_router(auth.router, prefix="/api/v1")
app.include_router(progress.router, prefix="/api/v1")
app.include_router(journal.router, prefix="/api/v1")
app.include_router(chat.router, prefix="/api/v1")


@app.get("/healthz")
def healthz():
    return {"ok": True}
