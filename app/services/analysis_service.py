"""Simulated market analysis: an Idle/Running state machine over a delay timer."""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from typing import Protocol

from app.models.enums import AnalysisStateEnum

_logger = logging.getLogger("farmaura.analysis")

CANNED_RECOMMENDATIONS: tuple[str, ...] = (
	"Based on current market trends, wheat seed prices are expected to drop 12% in the next 2 weeks. Recommend purchasing 500kg now.",
	"Fertilizer prices show seasonal stability. Current NPK prices are optimal for bulk purchasing.",
	"Weather forecast indicates dry conditions ahead. Recommend stocking up on irrigation supplies and drought-resistant seeds.",
	"Market analysis suggests corn seed prices will increase 8% next month due to supply chain issues. Consider early purchase.",
	"Pesticide demand is low this season. Excellent opportunity to purchase premium products at 20% discount.",
)


class Timer(Protocol):
	def cancel(self) -> bool: ...

	@property
	def cancelled(self) -> bool: ...


TimerFactory = Callable[[float, Callable[[], None]], Timer]


class DelayTimer:
	"""One-shot timer that calls ``callback`` on the running loop after ``delay`` seconds."""

	def __init__(self, delay: float, callback: Callable[[], None]):
		self.delay = delay
		self._callback = callback
		self._cancelled = False
		self._handle = asyncio.get_running_loop().call_later(delay, self._fire)

	def _fire(self) -> None:
		if self._cancelled:
			return
		self._callback()

	def cancel(self) -> bool:
		if self._cancelled:
			return False
		self._cancelled = True
		self._handle.cancel()
		return True

	@property
	def cancelled(self) -> bool:
		return self._cancelled


class AnalysisSimulator:
	"""Publishes one canned recommendation per run, after a fixed delay.

	``trigger`` is only honoured while idle; a trigger during a run is
	ignored and no extra completion is scheduled. ``rng`` and
	``timer_factory`` are injectable so runs can be made deterministic.
	"""

	def __init__(
		self,
		delay_seconds: float = 2.0,
		rng: random.Random | None = None,
		timer_factory: TimerFactory | None = None,
		recommendations: Sequence[str] = CANNED_RECOMMENDATIONS,
	):
		if delay_seconds < 0:
			raise ValueError("delay_seconds must be non-negative")
		if not recommendations:
			raise ValueError("recommendations must not be empty")
		self.delay_seconds = delay_seconds
		self.recommendations = tuple(recommendations)
		self._rng = rng or random.Random()
		self._timer_factory: TimerFactory = timer_factory or DelayTimer
		self._state = AnalysisStateEnum.idle
		self._recommendation = ""
		self._timer: Timer | None = None
		self._done: asyncio.Event | None = None
		self.started_at: datetime | None = None
		self.completed_at: datetime | None = None
		self.runs_completed = 0

	@property
	def state(self) -> AnalysisStateEnum:
		return self._state

	@property
	def is_running(self) -> bool:
		return self._state == AnalysisStateEnum.running

	@property
	def recommendation(self) -> str:
		"""Most recently published recommendation; empty before the first run completes."""
		return self._recommendation

	def trigger(self) -> bool:
		"""Start a run. Returns False, changing nothing, if one is already running."""
		if self._state != AnalysisStateEnum.idle:
			_logger.info("analysis_trigger_ignored", extra={"state": self._state.value})
			return False

		self._state = AnalysisStateEnum.running
		self.started_at = datetime.now(UTC)
		self._done = asyncio.Event()
		self._timer = self._timer_factory(self.delay_seconds, self._complete)
		_logger.info("analysis_started", extra={"delay_seconds": self.delay_seconds})
		return True

	async def wait(self) -> str:
		"""Wait for the current run, if any, and return the published recommendation."""
		if self._done is not None:
			await self._done.wait()
		return self._recommendation

	async def run(self) -> str:
		self.trigger()
		return await self.wait()

	def shutdown(self) -> None:
		"""Cancel a pending run without publishing; the simulator returns to idle."""
		if self._timer is not None and self._timer.cancel():
			_logger.info("analysis_cancelled")
		self._finish()

	def _complete(self) -> None:
		if self._state != AnalysisStateEnum.running:
			return
		index = self._rng.randrange(len(self.recommendations))
		self._recommendation = self.recommendations[index]
		self.completed_at = datetime.now(UTC)
		self.runs_completed += 1
		_logger.info("analysis_completed", extra={"recommendation_index": index})
		self._finish()

	def _finish(self) -> None:
		self._state = AnalysisStateEnum.idle
		self._timer = None
		if self._done is not None:
			self._done.set()
			self._done = None
