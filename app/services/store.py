"""Per-application dashboard state and its FastAPI dependency."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from fastapi import HTTPException, Request, status

from app.config import Settings, get_settings
from app.models.dashboard import FarmProfile, HealthMetric, MarketItem, MedicineDraft, MedicineItem
from app.models.seed import demo_farm_profile, demo_health_metrics, demo_market_items, demo_medicines
from app.services.analysis_service import AnalysisSimulator


@dataclass(slots=True)
class DashboardStore:
	"""Everything one dashboard session sees.

	Only ``medicines``, ``draft`` and ``analysis`` change after seeding, and
	only through ``InventoryService`` and ``AnalysisSimulator``.
	"""

	farm: FarmProfile
	health_metrics: tuple[HealthMetric, ...]
	market_items: tuple[MarketItem, ...]
	analysis: AnalysisSimulator
	medicines: list[MedicineItem] = field(default_factory=list)
	draft: MedicineDraft = field(default_factory=MedicineDraft)
	strict_inventory_bounds: bool = True

	@classmethod
	def seeded(cls, settings: Settings | None = None) -> DashboardStore:
		settings = settings or get_settings()
		return cls(
			farm=demo_farm_profile(),
			health_metrics=tuple(demo_health_metrics()),
			market_items=tuple(demo_market_items()),
			analysis=AnalysisSimulator(
				delay_seconds=settings.analysis_delay_seconds,
				rng=random.Random(settings.analysis_seed),
			),
			medicines=demo_medicines(),
			strict_inventory_bounds=settings.strict_inventory_bounds,
		)


def get_store(request: Request) -> DashboardStore:
	store = getattr(request.app.state, "store", None)
	if store is None:
		raise HTTPException(
			status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
			detail="Dashboard store is not initialised",
		)
	return store
