"""Pydantic schemas for the market prices table and the simulated analysis."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.enums import AnalysisStateEnum, DisplayTierEnum, TrendEnum


class MarketItemRead(BaseModel):
	name: str
	current_price: float
	price_display: str
	trend: TrendEnum
	trend_icon: str
	trend_tier: DisplayTierEnum
	recommendation: str


class AnalysisStatusResponse(BaseModel):
	state: AnalysisStateEnum
	recommendation: str = ""
	button_label: str
	started_at: datetime | None = None
	completed_at: datetime | None = None
	runs_completed: int = Field(default=0, ge=0)


class AnalysisTriggerResponse(AnalysisStatusResponse):
	started: bool


class MarketResponse(BaseModel):
	items: list[MarketItemRead] = Field(default_factory=list)
	analysis: AnalysisStatusResponse
