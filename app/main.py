"""FastAPI application entrypoint — lifespan, routers, middleware."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.middleware.logging import RequestLoggingMiddleware, configure_structured_logging
from app.routes import dashboard, inventory, market
from app.services.store import DashboardStore

logger = logging.getLogger("farmaura")

SERVICE_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup / shutdown lifecycle.

    Startup:
      1. Initialize structured logging
      2. Seed the in-memory dashboard store

    Shutdown:
      1. Cancel any pending market analysis timer
    """
    configure_structured_logging()
    settings = get_settings()
    logger.info(
        "Farm Aura starting",
        extra={
            "log_level": settings.log_level,
            "analysis_delay_seconds": settings.analysis_delay_seconds,
            "strict_inventory_bounds": settings.strict_inventory_bounds,
        },
    )

    store = DashboardStore.seeded(settings)
    app.state.store = store

    yield

    logger.info("Farm Aura shutting down")
    store.analysis.shutdown()


app = FastAPI(
    title="Farm Aura API",
    description=(
        "Smart farm management dashboard — farm profile, health monitoring, "
        "medicine inventory and market pricing with simulated AI purchase advice."
    ),
    version=SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS ────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


async def _run_readiness_checks(target: FastAPI) -> dict[str, dict[str, Any]]:
    store = getattr(target.state, "store", None)
    if store is None:
        return {
            "store": {"ok": False, "message": "store not initialised"},
            "analysis": {"ok": False, "message": "store not initialised"},
        }
    return {
        "store": {"ok": True, "message": f"{len(store.medicines)} inventory items"},
        "analysis": {"ok": True, "message": store.analysis.state.value},
    }


# ── Health check ────────────────────────────────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Basic health check — verifies the API process is alive."""
    return {
        "status": "ok",
        "service": "farmaura",
        "version": SERVICE_VERSION,
    }


@app.get("/health/ready", tags=["system"])
async def readiness_check() -> JSONResponse:
    checks = await _run_readiness_checks(app)
    healthy = all(check["ok"] for check in checks.values())
    return JSONResponse(
        status_code=200 if healthy else 503,
        content={"status": "ok" if healthy else "degraded", "checks": checks},
    )


# ── Router registration ────────────────────────────────────────────────────
app.include_router(dashboard.router, prefix="/api/v1")
app.include_router(inventory.router, prefix="/api/v1")
app.include_router(market.router, prefix="/api/v1")
