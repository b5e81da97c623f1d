"""Pydantic schemas for the overview, farm details and health monitor tabs."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.enums import DisplayTierEnum, HealthStatusEnum


class FarmProfileRead(BaseModel):
	name: str
	location: str
	size: str
	crops: list[str] = Field(default_factory=list)
	established: str


class FarmOverview(BaseModel):
	name: str
	location: str
	size: str
	crop_count: int = Field(ge=0)


class HealthMetricRead(BaseModel):
	name: str
	value: float
	unit: str
	status: HealthStatusEnum
	status_label: str
	tier: DisplayTierEnum
	progress: float = Field(ge=0.0, le=100.0)


class HealthMonitorResponse(BaseModel):
	metrics: list[HealthMetricRead] = Field(default_factory=list)


class InventorySummary(BaseModel):
	total_items: int = Field(ge=0)
	low_stock: int = Field(ge=0)
	expiring_soon: int = Field(ge=0)


class DashboardSummaryResponse(BaseModel):
	farm: FarmOverview
	health: list[HealthMetricRead] = Field(default_factory=list)
	inventory: InventorySummary
	last_updated: datetime
