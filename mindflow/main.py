# mindflow/main.py - MindFlow API (auth, moods, calendar events, AI mood analysis)
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session

from mindflow.core.config import settings
from mindflow.core.timezone import format_time, utc_now
from mindflow.db.base import Base
from mindflow.db.session import engine, get_db
from mindflow import models  # noqa: F401  registers tables on Base.metadata
from mindflow.routers import analysis, auth, events, moods

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(_: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("✅ Tables ready")
    yield


app = FastAPI(
    lifespan=lifespan,
    title="MindFlow Backend",
    version=VERSION,
    description="Mood tracking API: accounts, mood entries, calendar events and AI mood analysis"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(moods.router)
app.include_router(events.router)
app.include_router(analysis.router)


@app.get("/health")
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("select 1"))
    except Exception as e:
        logger.error("Database health check failed: %s", e)
        raise HTTPException(status_code=503, detail="Database not ready")
    return {
        "ok": True,
        "time": format_time(utc_now()),
        "version": VERSION,
        "features": {"ai_analysis": bool(settings.AI_GATEWAY_API_KEY)},
    }


@app.get("/")
def root():
    return {
        "service": "MindFlow Backend API",
        "version": VERSION,
        "status": "running",
        "docs": "/docs",
        "health": "/health",
    }
