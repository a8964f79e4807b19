from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lectern.api.v1.router import router as v1_router
from lectern.core import AsyncSessionLocal, engine, settings
from lectern.core.logging_config import setup_logging
from lectern.runtime.hub import LiveClassHub
from lectern.services.live_class_service import SqlLiveClassDirectory


def build_hub() -> LiveClassHub:
    directory = SqlLiveClassDirectory(AsyncSessionLocal) if settings.VERIFY_LIVE_CLASSES else None
    return LiveClassHub(
        directory=directory,
        sweep_joined_names=settings.SWEEP_JOINED_NAMES,
        outbox_maxsize=settings.WS_OUTBOX_MAXSIZE,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the live class hub for the lifetime of the server."""
    setup_logging()
    app.state.hub = build_hub()
    yield
    await engine.dispose()


app = FastAPI(title="lectern API", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.include_router(v1_router, prefix="/v1")


@app.get("/health", tags=["health"])
async def health_check() -> dict:
    return {"status": "ok"}
