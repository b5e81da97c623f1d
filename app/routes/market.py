"""Market prices and simulated analysis routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.schemas.market import AnalysisStatusResponse, AnalysisTriggerResponse, MarketResponse
from app.services.dashboard_service import DashboardService
from app.services.store import DashboardStore, get_store

router = APIRouter(prefix="/market", tags=["market"])


@router.get("", response_model=MarketResponse)
async def get_market(store: DashboardStore = Depends(get_store)) -> MarketResponse:
	return DashboardService(store).get_market()


@router.post("/analysis", response_model=AnalysisTriggerResponse, status_code=status.HTTP_202_ACCEPTED)
async def trigger_analysis(store: DashboardStore = Depends(get_store)) -> AnalysisTriggerResponse:
	started = store.analysis.trigger()
	snapshot = DashboardService(store).get_analysis_status()
	return AnalysisTriggerResponse(started=started, **snapshot.model_dump())


@router.get("/analysis", response_model=AnalysisStatusResponse)
async def get_analysis_status(store: DashboardStore = Depends(get_store)) -> AnalysisStatusResponse:
	return DashboardService(store).get_analysis_status()
