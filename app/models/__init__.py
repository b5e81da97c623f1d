"""Domain model registry — dashboard records, enums and demo seed data.

Application code can import everything from here::

    from app.models import MedicineItem, MedicineCategoryEnum, ...
"""

# ── Records ─────────────────────────────────────────────────────────────────
from app.models.dashboard import (
    FarmProfile,
    HealthMetric,
    MarketItem,
    MedicineCandidate,
    MedicineDraft,
    MedicineItem,
)

# ── Enums ───────────────────────────────────────────────────────────────────
from app.models.enums import (
    AnalysisStateEnum,
    DisplayTierEnum,
    HealthStatusEnum,
    MedicineCategoryEnum,
    TrendEnum,
)

__all__ = [
    "AnalysisStateEnum",
    "DisplayTierEnum",
    # Records
    "FarmProfile",
    "HealthMetric",
    # Enums
    "HealthStatusEnum",
    "MarketItem",
    "MedicineCandidate",
    "MedicineCategoryEnum",
    "MedicineDraft",
    "MedicineItem",
    "TrendEnum",
]
