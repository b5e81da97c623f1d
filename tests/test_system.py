from __future__ import annotations

import pytest
from httpx import AsyncClient

from app import main
from app.config import Settings
from app.services.store import DashboardStore


@pytest.mark.asyncio
async def test_health_ok(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["service"] == "farmaura"


@pytest.mark.asyncio
async def test_health_ready_ok(client: AsyncClient) -> None:
    main.app.state.store = DashboardStore.seeded(Settings(_env_file=None))
    try:
        response = await client.get("/health/ready")
    finally:
        del main.app.state.store

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["checks"]["analysis"]["message"] == "idle"


@pytest.mark.asyncio
async def test_health_ready_degraded(client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def _bad(_app):
        return {
            "store": {"ok": False, "message": "store not initialised"},
            "analysis": {"ok": True, "message": "idle"},
        }

    monkeypatch.setattr(main, "_run_readiness_checks", _bad)

    response = await client.get("/health/ready")
    assert response.status_code == 503
    body = response.json()
    assert body["status"] == "degraded"
    assert body["checks"]["store"]["ok"] is False


@pytest.mark.asyncio
async def test_request_id_is_propagated(client: AsyncClient) -> None:
    request_id = "dashboard-request-id"
    response = await client.get("/health", headers={"x-request-id": request_id})
    assert response.status_code == 200
    assert response.headers.get("x-request-id") == request_id


@pytest.mark.asyncio
async def test_request_id_generated_when_missing(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.status_code == 200
    generated = response.headers.get("x-request-id")
    assert generated is not None
    assert len(generated) >= 8


def test_settings_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.analysis_delay_seconds == 2.0
    assert settings.strict_inventory_bounds is True


def test_seeded_store_uses_settings() -> None:
    settings = Settings(_env_file=None, analysis_delay_seconds=0.5, strict_inventory_bounds=False)
    store = DashboardStore.seeded(settings)
    assert store.analysis.delay_seconds == 0.5
    assert store.strict_inventory_bounds is False
    assert len(store.medicines) == 3
