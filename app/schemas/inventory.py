"""Pydantic request/response schemas for the medicine inventory."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import DisplayTierEnum, MedicineCategoryEnum


class MedicineCreate(BaseModel):
	"""A typed candidate record; emptiness, quantity and bounds rules live in InventoryService."""

	model_config = ConfigDict(extra="forbid")

	name: str = Field(default="", max_length=255)
	category: MedicineCategoryEnum = MedicineCategoryEnum.fertilizer
	quality: int = 0
	quantity: int = 0
	expiry_date: date | None = None
	price: float = 0.0


class MedicineDraftUpdate(BaseModel):
	"""Raw form values; numeric fields accept free text and are coerced by the service."""

	model_config = ConfigDict(extra="forbid")

	name: str | None = Field(default=None, max_length=255)
	category: str | None = None
	quality: str | int | float | None = None
	quantity: str | int | float | None = None
	expiry_date: str | None = None
	price: str | int | float | None = None


class MedicineDraftRead(BaseModel):
	name: str
	category: MedicineCategoryEnum
	quality: int
	quantity: int
	expiry_date: date | None = None
	price: float


class MedicineRead(BaseModel):
	id: str
	name: str
	category: MedicineCategoryEnum
	quality: int
	quantity: int
	expiry_date: date | None = None
	price: float
	price_display: str
	low_stock: bool
	quantity_tier: DisplayTierEnum | None = None
	expiring_soon: bool


class InventoryResponse(BaseModel):
	items: list[MedicineRead] = Field(default_factory=list)
	total_items: int = Field(ge=0)
	low_stock: int = Field(ge=0)
	expiring_soon: int = Field(ge=0)


class MedicineListRead(BaseModel):
	items: list[MedicineRead] = Field(default_factory=list)
