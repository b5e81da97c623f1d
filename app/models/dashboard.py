"""In-memory domain records held by the dashboard store."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from app.models.enums import HealthStatusEnum, MedicineCategoryEnum, TrendEnum


@dataclass(frozen=True, slots=True)
class FarmProfile:
    """Static description of the farm shown on the overview and details tabs."""

    name: str
    location: str
    size: str
    crops: tuple[str, ...]
    established: str


@dataclass(frozen=True, slots=True)
class HealthMetric:
    """A monitored farm condition.

    ``status`` is assigned with the reading and is never derived from
    ``value``.
    """

    name: str
    value: float
    status: HealthStatusEnum
    unit: str


@dataclass(frozen=True, slots=True)
class MedicineItem:
    id: str
    name: str
    category: MedicineCategoryEnum
    quality: int
    quantity: int
    expiry_date: date | None
    price: float


@dataclass(frozen=True, slots=True)
class MarketItem:
    name: str
    current_price: float
    trend: TrendEnum
    recommendation: str


@dataclass(slots=True)
class MedicineDraft:
    """Pending inventory form fields, reset after a successful submit."""

    name: str = ""
    category: MedicineCategoryEnum = MedicineCategoryEnum.fertilizer
    quality: int = 0
    quantity: int = 0
    expiry_date: date | None = None
    price: float = 0.0


@dataclass(slots=True)
class MedicineCandidate:
    """A record offered to the inventory mutator, before an id is assigned."""

    name: str
    category: MedicineCategoryEnum = MedicineCategoryEnum.fertilizer
    quality: int = 0
    quantity: int = 0
    expiry_date: date | None = None
    price: float = 0.0

    @classmethod
    def from_draft(cls, draft: MedicineDraft) -> MedicineCandidate:
        return cls(
            name=draft.name,
            category=draft.category,
            quality=draft.quality,
            quantity=draft.quantity,
            expiry_date=draft.expiry_date,
            price=draft.price,
        )
