"""Enum types shared by the dashboard models, services and schemas.

Values are the wire strings used by the API, so they double as the accepted
input for form fields (e.g. ``category=herbicide``).
"""

from enum import StrEnum

# ── Farm condition enums ────────────────────────────────────────────────────


class HealthStatusEnum(StrEnum):
    """Externally assigned condition of a health metric."""

    good = "good"
    warning = "warning"
    critical = "critical"


class TrendEnum(StrEnum):
    """Direction of a market price."""

    up = "up"
    down = "down"
    stable = "stable"


# ── Inventory enums ─────────────────────────────────────────────────────────


class MedicineCategoryEnum(StrEnum):
    """Kind of product held in the medicine inventory."""

    pesticide = "pesticide"
    fertilizer = "fertilizer"
    herbicide = "herbicide"


# ── Analysis enums ──────────────────────────────────────────────────────────


class AnalysisStateEnum(StrEnum):
    """Lifecycle of the market analysis simulator."""

    idle = "idle"
    running = "running"


# ── Display enums ───────────────────────────────────────────────────────────


class DisplayTierEnum(StrEnum):
    """Colour tier a client renders a classified value with."""

    green = "green"
    yellow = "yellow"
    red = "red"
    gray = "gray"
