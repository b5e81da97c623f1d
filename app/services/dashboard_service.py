"""Per-tab view assembly from store contents into classified read models."""

from __future__ import annotations

from datetime import UTC, datetime

from app.models.dashboard import HealthMetric, MarketItem, MedicineDraft, MedicineItem
from app.schemas.dashboard import (
	DashboardSummaryResponse,
	FarmOverview,
	FarmProfileRead,
	HealthMetricRead,
	HealthMonitorResponse,
	InventorySummary,
)
from app.schemas.inventory import InventoryResponse, MedicineDraftRead, MedicineRead
from app.schemas.market import AnalysisStatusResponse, MarketItemRead, MarketResponse
from app.services import classifier
from app.services.inventory_service import expiring_soon, is_expiring_soon, is_low_stock, low_stock
from app.services.store import DashboardStore

OVERVIEW_METRIC_COUNT = 3

_BUTTON_IDLE = "Run AI Analysis"
_BUTTON_RUNNING = "Analyzing Market Data..."


class DashboardService:
	"""Builds the dashboard, farm, health, inventory and market views.

	Nothing is cached: every call re-derives tiers and filters from the
	current store contents.
	"""

	def __init__(self, store: DashboardStore):
		self.store = store

	def get_summary(self, now: datetime | None = None) -> DashboardSummaryResponse:
		now = now or datetime.now(UTC)
		farm = self.store.farm
		return DashboardSummaryResponse(
			farm=FarmOverview(
				name=farm.name,
				location=farm.location,
				size=farm.size,
				crop_count=len(farm.crops),
			),
			health=[self._to_metric_read(metric) for metric in self.store.health_metrics[:OVERVIEW_METRIC_COUNT]],
			inventory=InventorySummary(
				total_items=len(self.store.medicines),
				low_stock=len(low_stock(self.store.medicines)),
				expiring_soon=len(expiring_soon(self.store.medicines, now)),
			),
			last_updated=now,
		)

	def get_farm_profile(self) -> FarmProfileRead:
		farm = self.store.farm
		return FarmProfileRead(
			name=farm.name,
			location=farm.location,
			size=farm.size,
			crops=list(farm.crops),
			established=farm.established,
		)

	def get_health_monitor(self) -> HealthMonitorResponse:
		return HealthMonitorResponse(metrics=[self._to_metric_read(metric) for metric in self.store.health_metrics])

	def get_inventory(self, now: datetime | None = None) -> InventoryResponse:
		now = now or datetime.now(UTC)
		rows = [self.to_medicine_read(item, now) for item in self.store.medicines]
		return InventoryResponse(
			items=rows,
			total_items=len(rows),
			low_stock=sum(1 for row in rows if row.low_stock),
			expiring_soon=sum(1 for row in rows if row.expiring_soon),
		)

	def get_market(self) -> MarketResponse:
		return MarketResponse(
			items=[self._to_market_read(item) for item in self.store.market_items],
			analysis=self.get_analysis_status(),
		)

	def get_analysis_status(self) -> AnalysisStatusResponse:
		analysis = self.store.analysis
		return AnalysisStatusResponse(
			state=analysis.state,
			recommendation=analysis.recommendation,
			button_label=_BUTTON_RUNNING if analysis.is_running else _BUTTON_IDLE,
			started_at=analysis.started_at,
			completed_at=analysis.completed_at,
			runs_completed=analysis.runs_completed,
		)

	@staticmethod
	def to_medicine_read(item: MedicineItem, now: datetime | None = None) -> MedicineRead:
		low = is_low_stock(item)
		return MedicineRead(
			id=item.id,
			name=item.name,
			category=item.category,
			quality=item.quality,
			quantity=item.quantity,
			expiry_date=item.expiry_date,
			price=item.price,
			price_display=classifier.format_price(item.price),
			low_stock=low,
			quantity_tier=classifier.quantity_tier(low),
			expiring_soon=is_expiring_soon(item, now),
		)

	@staticmethod
	def to_draft_read(draft: MedicineDraft) -> MedicineDraftRead:
		return MedicineDraftRead(
			name=draft.name,
			category=draft.category,
			quality=draft.quality,
			quantity=draft.quantity,
			expiry_date=draft.expiry_date,
			price=draft.price,
		)

	@staticmethod
	def _to_metric_read(metric: HealthMetric) -> HealthMetricRead:
		return HealthMetricRead(
			name=metric.name,
			value=metric.value,
			unit=metric.unit,
			status=metric.status,
			status_label=classifier.status_label(metric.status),
			tier=classifier.status_tier(metric.status),
			progress=classifier.metric_progress(metric),
		)

	@staticmethod
	def _to_market_read(item: MarketItem) -> MarketItemRead:
		display = classifier.trend_display(item.trend)
		return MarketItemRead(
			name=item.name,
			current_price=item.current_price,
			price_display=classifier.format_price(item.current_price),
			trend=item.trend,
			trend_icon=display.icon,
			trend_tier=display.tier,
			recommendation=item.recommendation,
		)
