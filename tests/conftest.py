"""Shared pytest fixtures — async test client, fresh dashboard store, manual analysis timer."""

from __future__ import annotations

import random
from collections.abc import AsyncGenerator, Callable
from contextlib import asynccontextmanager
from datetime import date
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.main import app
from app.models.dashboard import MedicineItem
from app.models.enums import MedicineCategoryEnum
from app.services.analysis_service import AnalysisSimulator
from app.services.store import DashboardStore, get_store


class ManualTimer:
	"""Timer stand-in that only fires when the test says so."""

	def __init__(self, delay: float, callback: Callable[[], None]) -> None:
		self.delay = delay
		self._callback = callback
		self._cancelled = False
		self.fired = False

	def fire(self) -> None:
		if self._cancelled or self.fired:
			return
		self.fired = True
		self._callback()

	def cancel(self) -> bool:
		if self._cancelled or self.fired:
			return False
		self._cancelled = True
		return True

	@property
	def cancelled(self) -> bool:
		return self._cancelled


class ManualTimerFactory:
	def __init__(self) -> None:
		self.timers: list[ManualTimer] = []

	def __call__(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
		timer = ManualTimer(delay, callback)
		self.timers.append(timer)
		return timer

	@property
	def last(self) -> ManualTimer:
		return self.timers[-1]


@pytest.fixture
def timer_factory() -> ManualTimerFactory:
	return ManualTimerFactory()


@pytest.fixture
def simulator(timer_factory: ManualTimerFactory) -> AnalysisSimulator:
	return AnalysisSimulator(delay_seconds=2.0, rng=random.Random(7), timer_factory=timer_factory)


@pytest.fixture
def store(simulator: AnalysisSimulator) -> DashboardStore:
	"""A freshly seeded store whose simulator is driven by a manual timer."""
	seeded = DashboardStore.seeded(Settings(_env_file=None))
	seeded.analysis = simulator
	return seeded


@pytest.fixture
def make_item() -> Callable[..., MedicineItem]:
	def _make(
		item_id: str = "x",
		*,
		name: str = "Test Product",
		quantity: int = 30,
		expiry_date: date | None = None,
		category: MedicineCategoryEnum = MedicineCategoryEnum.fertilizer,
	) -> MedicineItem:
		return MedicineItem(
			id=item_id,
			name=name,
			category=category,
			quality=90,
			quantity=quantity,
			expiry_date=expiry_date,
			price=10.0,
		)

	return _make


@pytest.fixture
async def client(store: DashboardStore) -> AsyncGenerator[AsyncClient, None]:
	"""HTTPX async client with lifespan disabled and the store dependency overridden."""

	def override_get_store() -> DashboardStore:
		return store

	app.dependency_overrides[get_store] = override_get_store
	original_lifespan = app.router.lifespan_context

	@asynccontextmanager
	async def noop_lifespan(_: Any) -> AsyncGenerator[None, None]:
		yield

	app.router.lifespan_context = noop_lifespan

	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://test") as test_client:
		yield test_client

	app.router.lifespan_context = original_lifespan
	app.dependency_overrides.clear()
