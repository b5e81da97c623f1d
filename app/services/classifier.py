"""Display classification for health statuses, price trends and stock levels.

All functions are pure: they map a static input value to the tier, glyph or
label a client renders. Nothing here looks at a metric's numeric value to
decide its status.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.models.dashboard import HealthMetric
from app.models.enums import DisplayTierEnum, HealthStatusEnum, TrendEnum

_STATUS_TIERS: dict[str, DisplayTierEnum] = {
	HealthStatusEnum.good: DisplayTierEnum.green,
	HealthStatusEnum.warning: DisplayTierEnum.yellow,
	HealthStatusEnum.critical: DisplayTierEnum.red,
}

_PH_SCALE_MAX = 14.0


@dataclass(frozen=True, slots=True)
class TrendDisplay:
	icon: str
	tier: DisplayTierEnum


_TREND_DISPLAY: dict[str, TrendDisplay] = {
	TrendEnum.up: TrendDisplay(icon="↗️", tier=DisplayTierEnum.red),
	TrendEnum.down: TrendDisplay(icon="↘️", tier=DisplayTierEnum.green),
	TrendEnum.stable: TrendDisplay(icon="→", tier=DisplayTierEnum.gray),
}


def status_tier(status: str) -> DisplayTierEnum:
	"""Map a health status to its colour tier; unknown statuses are gray."""
	return _STATUS_TIERS.get(str(status), DisplayTierEnum.gray)


def status_label(status: str) -> str:
	text = str(status)
	return text[:1].upper() + text[1:]


def trend_display(trend: str) -> TrendDisplay:
	"""Map a price trend to its icon and tier; unknown trends render as stable."""
	return _TREND_DISPLAY.get(str(trend), _TREND_DISPLAY[TrendEnum.stable])


def trend_icon(trend: str) -> str:
	return trend_display(trend).icon


def trend_tier(trend: str) -> DisplayTierEnum:
	return trend_display(trend).tier


def metric_progress(metric: HealthMetric) -> float:
	"""Percentage filled on a metric's progress bar.

	pH readings sit on a 0-14 scale; every other metric is already a
	percentage-like number and is shown as-is. The result is clamped to
	[0, 100].
	"""
	if metric.unit == "pH" or metric.name == "pH Level":
		raw = (metric.value / _PH_SCALE_MAX) * 100.0
	else:
		raw = float(metric.value)
	return max(0.0, min(100.0, raw))


def quantity_tier(is_low_stock: bool) -> DisplayTierEnum | None:
	return DisplayTierEnum.red if is_low_stock else None


def format_price(amount: float) -> str:
	return f"${amount:.2f}"
