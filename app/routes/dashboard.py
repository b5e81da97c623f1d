"""Overview, farm details and health monitor routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.schemas.dashboard import DashboardSummaryResponse, FarmProfileRead, HealthMonitorResponse
from app.services.dashboard_service import DashboardService
from app.services.store import DashboardStore, get_store

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="dashboard failure")


@router.get("", response_model=DashboardSummaryResponse)
async def get_summary(store: DashboardStore = Depends(get_store)) -> DashboardSummaryResponse:
	try:
		return DashboardService(store).get_summary()
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/farm", response_model=FarmProfileRead)
async def get_farm_profile(store: DashboardStore = Depends(get_store)) -> FarmProfileRead:
	try:
		return DashboardService(store).get_farm_profile()
	except Exception as exc:
		raise _map_error(exc) from exc


@router.get("/health", response_model=HealthMonitorResponse)
async def get_health_monitor(store: DashboardStore = Depends(get_store)) -> HealthMonitorResponse:
	try:
		return DashboardService(store).get_health_monitor()
	except Exception as exc:
		raise _map_error(exc) from exc
