"""Demo records the dashboard store is seeded with at startup."""

from __future__ import annotations

from datetime import date

from app.models.dashboard import FarmProfile, HealthMetric, MarketItem, MedicineItem
from app.models.enums import HealthStatusEnum, MedicineCategoryEnum, TrendEnum


def demo_farm_profile() -> FarmProfile:
    return FarmProfile(
        name="Green Valley Farm",
        location="Sacramento Valley, California",
        size="250 acres",
        crops=("Wheat", "Corn", "Soybeans", "Tomatoes"),
        established="2015",
    )


def demo_health_metrics() -> list[HealthMetric]:
    return [
        HealthMetric("Soil Moisture", 75, HealthStatusEnum.good, "%"),
        HealthMetric("Temperature", 24, HealthStatusEnum.good, "°C"),
        HealthMetric("Humidity", 60, HealthStatusEnum.warning, "%"),
        HealthMetric("pH Level", 6.8, HealthStatusEnum.good, "pH"),
        HealthMetric("Nitrogen Level", 45, HealthStatusEnum.warning, "ppm"),
    ]


def demo_medicines() -> list[MedicineItem]:
    return [
        MedicineItem(
            id="1",
            name="Roundup Herbicide",
            category=MedicineCategoryEnum.herbicide,
            quality=95,
            quantity=25,
            expiry_date=date(2025, 6, 15),
            price=45.99,
        ),
        MedicineItem(
            id="2",
            name="NPK Fertilizer",
            category=MedicineCategoryEnum.fertilizer,
            quality=88,
            quantity=50,
            expiry_date=date(2024, 12, 30),
            price=32.50,
        ),
        MedicineItem(
            id="3",
            name="Insect Control Spray",
            category=MedicineCategoryEnum.pesticide,
            quality=92,
            quantity=15,
            expiry_date=date(2025, 3, 20),
            price=28.75,
        ),
    ]


def demo_market_items() -> list[MarketItem]:
    return [
        MarketItem("Wheat Seeds", 125.50, TrendEnum.down, "Buy Now - Price dropping"),
        MarketItem("Corn Seeds", 89.25, TrendEnum.up, "Wait - Price rising"),
        MarketItem("Fertilizer NPK", 32.50, TrendEnum.stable, "Good time to buy"),
        MarketItem("Pesticide Premium", 67.80, TrendEnum.down, "Buy Now - 15% discount expected"),
    ]
