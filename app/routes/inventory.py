"""Medicine inventory routes for the table, the stock filters and the pending draft."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.models.dashboard import MedicineCandidate
from app.schemas.inventory import (
	InventoryResponse,
	MedicineCreate,
	MedicineDraftRead,
	MedicineDraftUpdate,
	MedicineListRead,
	MedicineRead,
)
from app.services.dashboard_service import DashboardService
from app.services.inventory_service import InventoryService
from app.services.store import DashboardStore, get_store

router = APIRouter(prefix="/inventory", tags=["inventory"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, LookupError):
		return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="inventory failure")


@router.get("", response_model=InventoryResponse)
async def list_inventory(store: DashboardStore = Depends(get_store)) -> InventoryResponse:
	return DashboardService(store).get_inventory()


@router.get("/low-stock", response_model=MedicineListRead)
async def list_low_stock(store: DashboardStore = Depends(get_store)) -> MedicineListRead:
	items = InventoryService(store).low_stock_items()
	return MedicineListRead(items=[DashboardService.to_medicine_read(item) for item in items])


@router.get("/expiring", response_model=MedicineListRead)
async def list_expiring(store: DashboardStore = Depends(get_store)) -> MedicineListRead:
	items = InventoryService(store).expiring_items()
	return MedicineListRead(items=[DashboardService.to_medicine_read(item) for item in items])


@router.post("", response_model=MedicineRead, status_code=status.HTTP_201_CREATED)
async def add_medicine(
	payload: MedicineCreate,
	store: DashboardStore = Depends(get_store),
) -> MedicineRead:
	service = InventoryService(store)
	try:
		item = service.add_medicine(MedicineCandidate(**payload.model_dump()))
	except Exception as exc:
		raise _map_error(exc) from exc
	return DashboardService.to_medicine_read(item)


@router.get("/draft", response_model=MedicineDraftRead)
async def get_draft(store: DashboardStore = Depends(get_store)) -> MedicineDraftRead:
	return DashboardService.to_draft_read(InventoryService(store).get_draft())


@router.patch("/draft", response_model=MedicineDraftRead)
async def update_draft(
	payload: MedicineDraftUpdate,
	store: DashboardStore = Depends(get_store),
) -> MedicineDraftRead:
	service = InventoryService(store)
	try:
		draft = service.update_draft(payload.model_dump(exclude_unset=True))
	except Exception as exc:
		raise _map_error(exc) from exc
	return DashboardService.to_draft_read(draft)


@router.delete("/draft", response_model=MedicineDraftRead)
async def reset_draft(store: DashboardStore = Depends(get_store)) -> MedicineDraftRead:
	return DashboardService.to_draft_read(InventoryService(store).reset_draft())


@router.post("/draft/submit", response_model=MedicineRead, status_code=status.HTTP_201_CREATED)
async def submit_draft(store: DashboardStore = Depends(get_store)) -> MedicineRead:
	service = InventoryService(store)
	try:
		item = service.submit_draft()
	except Exception as exc:
		raise _map_error(exc) from exc
	return DashboardService.to_medicine_read(item)
