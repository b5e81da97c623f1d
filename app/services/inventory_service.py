"""Medicine inventory — append-only mutator, draft form state and stock filters."""

from __future__ import annotations

import logging
import math
import re
import time
from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace
from datetime import UTC, date, datetime, time as dt_time, timedelta
from typing import Any

from app.models.dashboard import MedicineCandidate, MedicineDraft, MedicineItem
from app.models.enums import MedicineCategoryEnum
from app.services.store import DashboardStore

_logger = logging.getLogger("farmaura.inventory")

LOW_STOCK_THRESHOLD = 20
EXPIRY_WINDOW = timedelta(days=30)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_DRAFT_FIELDS = frozenset({"name", "category", "quality", "quantity", "expiry_date", "price"})


class InventoryRejected(ValueError):
	"""Raised when a candidate record is refused; the inventory is left untouched."""

	def __init__(self, reason: str):
		super().__init__(reason)
		self.reason = reason


# ── Filters ─────────────────────────────────────────────────────────────────


def is_low_stock(item: MedicineItem) -> bool:
	return item.quantity < LOW_STOCK_THRESHOLD


def is_expiring_soon(item: MedicineItem, now: datetime | None = None) -> bool:
	"""True when the item expires (at midnight UTC) before ``now`` + 30 days.

	Items without an expiry date never count as expiring.
	"""
	if item.expiry_date is None:
		return False
	now = now or datetime.now(UTC)
	expires_at = datetime.combine(item.expiry_date, dt_time.min, tzinfo=UTC)
	return expires_at < now + EXPIRY_WINDOW


def low_stock(items: Iterable[MedicineItem]) -> list[MedicineItem]:
	return [item for item in items if is_low_stock(item)]


def expiring_soon(items: Iterable[MedicineItem], now: datetime | None = None) -> list[MedicineItem]:
	now = now or datetime.now(UTC)
	return [item for item in items if is_expiring_soon(item, now)]


# ── Form coercion ───────────────────────────────────────────────────────────


def coerce_int(raw: Any) -> int:
	"""Leading integer of a form value, or 0 when there is none ("12kg" -> 12, "abc" -> 0)."""
	if isinstance(raw, bool) or raw is None:
		return 0
	if isinstance(raw, int):
		return raw
	if isinstance(raw, float):
		return int(raw) if math.isfinite(raw) else 0
	match = _LEADING_INT.match(str(raw))
	return int(match.group(1)) if match else 0


def coerce_float(raw: Any) -> float:
	"""Leading decimal number of a form value, or 0.0 when there is none."""
	if isinstance(raw, bool) or raw is None:
		return 0.0
	if isinstance(raw, (int, float)):
		value = float(raw)
		return value if math.isfinite(value) else 0.0
	match = _LEADING_FLOAT.match(str(raw))
	return float(match.group(1)) if match else 0.0


def parse_expiry(raw: Any) -> date | None:
	if raw is None:
		return None
	if isinstance(raw, datetime):
		return raw.date()
	if isinstance(raw, date):
		return raw
	text = str(raw).strip()
	if not text:
		return None
	try:
		return date.fromisoformat(text)
	except ValueError as exc:
		raise ValueError(f"Invalid expiry date: {text!r}") from exc


def parse_category(raw: Any) -> MedicineCategoryEnum:
	try:
		return MedicineCategoryEnum(str(raw))
	except ValueError as exc:
		allowed = ", ".join(category.value for category in MedicineCategoryEnum)
		raise ValueError(f"Unknown category {raw!r}; expected one of: {allowed}") from exc


# ── Service ─────────────────────────────────────────────────────────────────


class InventoryService:
	"""Single entry point for every inventory and draft mutation."""

	def __init__(
		self,
		store: DashboardStore,
		clock: Callable[[], float] = time.time,
	):
		self.store = store
		self._clock = clock

	def list_items(self) -> list[MedicineItem]:
		return list(self.store.medicines)

	def low_stock_items(self) -> list[MedicineItem]:
		return low_stock(self.store.medicines)

	def expiring_items(self, now: datetime | None = None) -> list[MedicineItem]:
		return expiring_soon(self.store.medicines, now)

	def add_medicine(self, candidate: MedicineCandidate) -> MedicineItem:
		self._validate(candidate)
		item = MedicineItem(
			id=self._next_id(),
			name=candidate.name,
			category=candidate.category,
			quality=candidate.quality,
			quantity=candidate.quantity,
			expiry_date=candidate.expiry_date,
			price=candidate.price,
		)
		self.store.medicines.append(item)
		_logger.info(
			"inventory_item_added",
			extra={"item_id": item.id, "category": item.category.value, "quantity": item.quantity},
		)
		return item

	def get_draft(self) -> MedicineDraft:
		return self.store.draft

	def update_draft(self, fields: Mapping[str, Any]) -> MedicineDraft:
		unknown = set(fields) - _DRAFT_FIELDS
		if unknown:
			raise ValueError(f"Unknown draft fields: {', '.join(sorted(unknown))}")

		changes: dict[str, Any] = {}
		if "name" in fields:
			changes["name"] = "" if fields["name"] is None else str(fields["name"])
		if fields.get("category") is not None:
			changes["category"] = parse_category(fields["category"])
		if "quality" in fields:
			changes["quality"] = coerce_int(fields["quality"])
		if "quantity" in fields:
			changes["quantity"] = coerce_int(fields["quantity"])
		if "expiry_date" in fields:
			changes["expiry_date"] = parse_expiry(fields["expiry_date"])
		if "price" in fields:
			changes["price"] = coerce_float(fields["price"])

		self.store.draft = replace(self.store.draft, **changes)
		return self.store.draft

	def reset_draft(self) -> MedicineDraft:
		self.store.draft = MedicineDraft()
		return self.store.draft

	def submit_draft(self) -> MedicineItem:
		item = self.add_medicine(MedicineCandidate.from_draft(self.store.draft))
		self.store.draft = MedicineDraft()
		return item

	def _validate(self, candidate: MedicineCandidate) -> None:
		reason: str | None = None
		if not candidate.name:
			reason = "name is required"
		elif candidate.quantity <= 0:
			reason = "quantity must be greater than zero"
		elif not math.isfinite(candidate.price):
			reason = "price must be a finite number"
		elif self.store.strict_inventory_bounds:
			if not 0 <= candidate.quality <= 100:
				reason = "quality must be between 0 and 100"
			elif candidate.price < 0:
				reason = "price must not be negative"

		if reason is not None:
			_logger.info("inventory_item_rejected", extra={"reason": reason})
			raise InventoryRejected(reason)

	def _next_id(self) -> str:
		existing = {item.id for item in self.store.medicines}
		candidate = int(self._clock() * 1000)
		while str(candidate) in existing:
			candidate += 1
		return str(candidate)
