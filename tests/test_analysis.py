from __future__ import annotations

import asyncio
import random

import pytest
from httpx import AsyncClient

from app.models.enums import AnalysisStateEnum
from app.services.analysis_service import CANNED_RECOMMENDATIONS, AnalysisSimulator, DelayTimer
from app.services.store import DashboardStore


def test_trigger_moves_to_running(simulator: AnalysisSimulator, timer_factory) -> None:
	assert simulator.state == AnalysisStateEnum.idle
	assert simulator.recommendation == ""

	assert simulator.trigger() is True

	assert simulator.state == AnalysisStateEnum.running
	assert len(timer_factory.timers) == 1
	assert timer_factory.last.delay == 2.0
	assert simulator.started_at is not None


def test_retrigger_while_running_is_noop(simulator: AnalysisSimulator, timer_factory) -> None:
	simulator.trigger()

	assert simulator.trigger() is False

	assert simulator.state == AnalysisStateEnum.running
	assert len(timer_factory.timers) == 1
	timer_factory.last.fire()
	assert simulator.runs_completed == 1


def test_completion_publishes_canned_recommendation(simulator: AnalysisSimulator, timer_factory) -> None:
	expected_index = random.Random(7).randrange(len(CANNED_RECOMMENDATIONS))

	simulator.trigger()
	timer_factory.last.fire()

	assert simulator.state == AnalysisStateEnum.idle
	assert simulator.recommendation in CANNED_RECOMMENDATIONS
	assert simulator.recommendation == CANNED_RECOMMENDATIONS[expected_index]
	assert simulator.completed_at is not None


def test_can_run_again_after_completion(simulator: AnalysisSimulator, timer_factory) -> None:
	simulator.trigger()
	timer_factory.last.fire()

	assert simulator.trigger() is True
	timer_factory.last.fire()

	assert simulator.runs_completed == 2
	assert len(timer_factory.timers) == 2


def test_shutdown_cancels_without_publishing(simulator: AnalysisSimulator, timer_factory) -> None:
	simulator.trigger()

	simulator.shutdown()

	assert timer_factory.last.cancelled is True
	assert simulator.state == AnalysisStateEnum.idle
	assert simulator.recommendation == ""
	assert simulator.runs_completed == 0


def test_invalid_construction() -> None:
	with pytest.raises(ValueError):
		AnalysisSimulator(delay_seconds=-1)
	with pytest.raises(ValueError):
		AnalysisSimulator(recommendations=[])


@pytest.mark.asyncio
async def test_wait_returns_after_timer_fires(simulator: AnalysisSimulator, timer_factory) -> None:
	simulator.trigger()
	asyncio.get_running_loop().call_soon(timer_factory.last.fire)

	result = await simulator.wait()

	assert result in CANNED_RECOMMENDATIONS
	assert simulator.state == AnalysisStateEnum.idle


@pytest.mark.asyncio
async def test_wait_when_idle_returns_immediately(simulator: AnalysisSimulator) -> None:
	assert await simulator.wait() == ""


@pytest.mark.asyncio
async def test_run_with_real_delay_timer() -> None:
	simulator = AnalysisSimulator(delay_seconds=0.01, rng=random.Random(3))

	result = await simulator.run()

	assert result == CANNED_RECOMMENDATIONS[random.Random(3).randrange(len(CANNED_RECOMMENDATIONS))]
	assert simulator.state == AnalysisStateEnum.idle


@pytest.mark.asyncio
async def test_delay_timer_cancel() -> None:
	fired: list[bool] = []
	timer = DelayTimer(0.01, lambda: fired.append(True))

	assert timer.cancel() is True
	assert timer.cancel() is False
	await asyncio.sleep(0.03)

	assert fired == []
	assert timer.cancelled is True


@pytest.mark.asyncio
async def test_trigger_endpoint_and_noop_retrigger(client: AsyncClient, timer_factory) -> None:
	first = await client.post("/api/v1/market/analysis")
	assert first.status_code == 202
	assert first.json()["started"] is True
	assert first.json()["state"] == "running"
	assert first.json()["button_label"] == "Analyzing Market Data..."

	second = await client.post("/api/v1/market/analysis")
	assert second.json()["started"] is False
	assert second.json()["state"] == "running"
	assert len(timer_factory.timers) == 1

	timer_factory.last.fire()

	status = await client.get("/api/v1/market/analysis")
	body = status.json()
	assert body["state"] == "idle"
	assert body["recommendation"] in CANNED_RECOMMENDATIONS
	assert body["button_label"] == "Run AI Analysis"
	assert body["runs_completed"] == 1


@pytest.mark.asyncio
async def test_market_view_includes_analysis(client: AsyncClient, store: DashboardStore) -> None:
	response = await client.get("/api/v1/market")

	assert response.status_code == 200
	body = response.json()
	assert body["analysis"]["state"] == "idle"
	assert body["analysis"]["recommendation"] == ""
	assert len(body["items"]) == len(store.market_items)
